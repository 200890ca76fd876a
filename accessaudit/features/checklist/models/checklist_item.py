from enum import Enum

from sqlalchemy import Boolean, Column, String, Text

from accessaudit.platform.db.base import BaseModel


class ChecklistCategory(str, Enum):
    VISION = "vision"
    HEARING = "hearing"
    MOTOR = "motor"
    COGNITIVE = "cognitive"


class ChecklistItemRecord(BaseModel):
    __tablename__ = "checklist_items"

    category = Column(String(20), nullable=False, index=True)
    title = Column(String(512), nullable=False)
    description = Column(Text, nullable=False)
    wcag_reference = Column(String(50), nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False)
