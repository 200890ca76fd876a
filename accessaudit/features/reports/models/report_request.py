from enum import Enum

from sqlalchemy import Column, Integer, String, Text

from accessaudit.platform.db.base import BaseModel


class ReportFormat(str, Enum):
    PDF = "pdf"
    CSV = "csv"
    JSON = "json"


class RequestStatus(str, Enum):
    PENDING = "pending"
    RECEIVED = "received"
    COMPLETED = "completed"
    FAILED = "failed"


class ReportRequestRecord(BaseModel):
    __tablename__ = "report_requests"

    # Not a ForeignKey: the service checks the scan exists before insert
    scan_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    requested_format = Column(String(10), nullable=False)
    status = Column(String(20), nullable=False, default=RequestStatus.PENDING.value)

    def __repr__(self) -> str:
        return (
            f"<ReportRequestRecord(id={self.id}, scan_id={self.scan_id}, "
            f"format='{self.requested_format}', status='{self.status}')>"
        )
