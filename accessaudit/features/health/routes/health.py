from fastapi import APIRouter, Request, status

from accessaudit.platform.response import api_response

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(request: Request):
    return api_response(
        {
            "status": "ok",
            "service": request.app.state.settings.APP_NAME,
            "storage": request.app.state.store.backend,
        },
        status_code=status.HTTP_200_OK,
    )


@router.get("/", tags=["Info"])
async def root(request: Request):
    settings = request.app.state.settings
    return api_response(
        {
            "app_name": settings.APP_NAME,
            "description": "Mock accessibility scans, audit checklist and knowledge base.",
            "version": request.app.version,
            "docs_url": "/docs",
            "api_base": settings.API_PREFIX,
        },
        status_code=status.HTTP_200_OK,
    )
