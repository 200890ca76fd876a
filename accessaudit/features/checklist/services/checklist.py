from typing import List, Optional

from accessaudit.features.checklist.schemas.checklist import ChecklistItem
from accessaudit.platform.exceptions import NotFoundError, ValidationError
from accessaudit.platform.logger import get_logger
from accessaudit.platform.storage.base import Store

logger = get_logger(__name__)


class ChecklistService:
    def __init__(self, store: Store):
        self.store = store

    async def list(self, category: Optional[str] = None) -> List[ChecklistItem]:
        """Unknown categories yield an empty list, not an error."""
        return await self.store.list_checklist_items(category)

    async def toggle(self, item_id: int, is_completed) -> ChecklistItem:
        # bool is checked exactly; 0/1 are not accepted
        if not isinstance(is_completed, bool):
            raise ValidationError("isCompleted must be a boolean")

        try:
            item = await self.store.update_checklist_item(item_id, is_completed)
        except NotFoundError:
            logger.warning(f"Toggle requested for unknown checklist item {item_id}")
            raise

        logger.info(f"Checklist item {item_id} marked {'complete' if is_completed else 'incomplete'}")
        return item
