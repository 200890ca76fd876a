from typing import List

from accessaudit.features.reports.schemas.report_request import (
    ReportRequest,
    ReportRequestAck,
    ReportRequestCreate,
    ReportRequestIn,
)
from accessaudit.platform.exceptions import NotFoundError, ValidationError
from accessaudit.platform.logger import get_logger
from accessaudit.platform.storage.base import Store

logger = get_logger(__name__)

ACKNOWLEDGEMENT = "Report request submitted successfully. We will contact you within 24 hours."


class ReportRequestService:
    def __init__(self, store: Store):
        self.store = store

    async def submit(self, payload: ReportRequestIn) -> ReportRequestAck:
        """
        Record a request for a detailed report on an existing scan.

        Nothing is emailed here; fulfilment happens outside this service.
        """
        if not payload.scan_id or not payload.name or not payload.email or not payload.requested_format:
            raise ValidationError("Scan ID, name, email, and requested format are required")

        name = payload.name.strip()
        if len(name) < 2:
            raise ValidationError("Name must be at least 2 characters")

        scan = await self.store.get_scan(payload.scan_id)
        if not scan:
            logger.warning(f"Report requested for missing scan {payload.scan_id}")
            raise NotFoundError("Scan result not found")

        submission = await self.store.create_report_request(
            ReportRequestCreate(
                scan_id=payload.scan_id,
                name=name,
                email=str(payload.email),
                company=payload.company or None,
                message=payload.message or None,
                requested_format=payload.requested_format,
            )
        )

        logger.info(
            "Report request accepted",
            extra={
                "request_id": submission.id,
                "scan_id": submission.scan_id,
                "requested_format": submission.requested_format.value,
            },
        )

        return ReportRequestAck(message=ACKNOWLEDGEMENT, request_id=submission.id)

    async def list_requests(self) -> List[ReportRequest]:
        return await self.store.list_report_requests()
