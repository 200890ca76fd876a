from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    data: Any,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Single source of truth for successful API responses.
    Pydantic records are emitted with their camelCase aliases.
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(data, by_alias=True),
    )


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})
