from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, StrictInt

from accessaudit.features.reports.models.report_request import ReportFormat, RequestStatus
from accessaudit.platform.schemas import CamelModel


class ReportRequestIn(CamelModel):
    """Body of POST /request-report; required fields are checked by the service."""
    # StrictInt: true or "5" are rejected instead of coerced
    scan_id: Optional[StrictInt] = Field(None, description="Id of the scan the report is for")
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    company: Optional[str] = None
    message: Optional[str] = None
    requested_format: Optional[ReportFormat] = None


class ReportRequestCreate(CamelModel):
    scan_id: int
    name: str
    email: str
    company: Optional[str] = None
    message: Optional[str] = None
    requested_format: ReportFormat


class ReportRequest(ReportRequestCreate):
    id: int
    status: RequestStatus = RequestStatus.PENDING
    created_at: datetime


class ReportRequestAck(CamelModel):
    message: str
    request_id: int
