from typing import Optional

from pydantic import StrictBool

from accessaudit.features.checklist.models.checklist_item import ChecklistCategory
from accessaudit.platform.schemas import CamelModel


class ChecklistItemCreate(CamelModel):
    category: ChecklistCategory
    title: str
    description: str
    wcag_reference: Optional[str] = None
    is_completed: bool = False


class ChecklistItem(ChecklistItemCreate):
    id: int


class ChecklistToggle(CamelModel):
    # StrictBool: "true" or 1 are rejected instead of coerced
    is_completed: Optional[StrictBool] = None
