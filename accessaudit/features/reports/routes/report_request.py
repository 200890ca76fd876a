from fastapi import APIRouter, Depends, status

from accessaudit.features.reports.schemas.report_request import ReportRequestAck, ReportRequestIn
from accessaudit.features.reports.services.report_request import ReportRequestService
from accessaudit.platform.dependencies import get_report_request_service
from accessaudit.platform.exceptions import AppError
from accessaudit.platform.logger import get_logger
from accessaudit.platform.response import api_response, error_response

router = APIRouter(tags=["Report Requests"])
logger = get_logger(__name__)


@router.post(
    "/request-report",
    response_model=ReportRequestAck,
    status_code=status.HTTP_200_OK,
    summary="Request a detailed report for a scan",
)
async def request_report(
    payload: ReportRequestIn,
    service: ReportRequestService = Depends(get_report_request_service),
):
    try:
        ack = await service.submit(payload)
    except AppError:
        raise
    except Exception:
        logger.exception("Report request submission failed")
        return error_response("Failed to submit report request", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return api_response(ack)
