from typing import Optional

from fastapi import APIRouter, Depends, status

from accessaudit.features.checklist.schemas.checklist import ChecklistItem, ChecklistToggle
from accessaudit.features.checklist.services.checklist import ChecklistService
from accessaudit.platform.dependencies import get_checklist_service
from accessaudit.platform.exceptions import AppError
from accessaudit.platform.logger import get_logger
from accessaudit.platform.response import api_response, error_response

router = APIRouter(prefix="/checklist", tags=["Checklist"])
logger = get_logger(__name__)


@router.get("", response_model=list[ChecklistItem], status_code=status.HTTP_200_OK)
async def list_checklist_items(
    category: Optional[str] = None,
    service: ChecklistService = Depends(get_checklist_service),
):
    try:
        items = await service.list(category)
    except Exception:
        logger.exception("Listing checklist items failed")
        return error_response("Failed to fetch checklist items", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return api_response(items)


@router.patch("/{item_id}", response_model=ChecklistItem, status_code=status.HTTP_200_OK)
async def toggle_checklist_item(
    item_id: int,
    payload: ChecklistToggle,
    service: ChecklistService = Depends(get_checklist_service),
):
    # Unknown ids surface as 404 through NotFoundError
    try:
        item = await service.toggle(item_id, payload.is_completed)
    except AppError:
        raise
    except Exception:
        logger.exception(f"Updating checklist item {item_id} failed")
        return error_response("Failed to update checklist item", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return api_response(item)
