from fastapi import APIRouter, Depends, Request, status

from accessaudit.features.scan.schemas.scan import ScanRequest, ScanResult
from accessaudit.features.scan.services.scanner import ScanStubService
from accessaudit.platform.dependencies import get_scan_service, get_store
from accessaudit.platform.exceptions import AppError, NotFoundError
from accessaudit.platform.logger import get_logger
from accessaudit.platform.response import api_response, error_response
from accessaudit.platform.storage.base import Store
from accessaudit.platform.utils.client import get_client_ip

router = APIRouter(tags=["Scan"])
logger = get_logger(__name__)


@router.post(
    "/scan",
    response_model=ScanResult,
    status_code=status.HTTP_200_OK,
    summary="Run a mock accessibility scan",
    description="Validates the URL, synthesizes a score with sample findings and stores the result",
)
async def create_scan(
    payload: ScanRequest,
    request: Request,
    scanner: ScanStubService = Depends(get_scan_service),
    store: Store = Depends(get_store),
):
    try:
        scanner.validate_request(payload.url, payload.scan_type)
        scan_data = scanner.perform_scan(
            url=payload.url.strip(),
            scan_type=payload.scan_type.strip(),
            ip_address=get_client_ip(request),
        )
        scan = await store.create_scan(scan_data)
    except AppError:
        raise
    except Exception:
        logger.exception("Accessibility scan failed")
        return error_response("Failed to perform accessibility scan", status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(f"Scan {scan.id} stored for {scan.url} (score={scan.score}, {scan.wcag_level})")
    return api_response(scan)


@router.get("/scan-results", response_model=list[ScanResult], status_code=status.HTTP_200_OK)
async def list_scan_results(store: Store = Depends(get_store)):
    try:
        results = await store.list_scans()
    except Exception:
        logger.exception("Listing scan results failed")
        return error_response("Failed to fetch scan results", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return api_response(results)


@router.get("/scan-results/{scan_id}", response_model=ScanResult, status_code=status.HTTP_200_OK)
async def get_scan_result(scan_id: int, store: Store = Depends(get_store)):
    try:
        result = await store.get_scan(scan_id)
    except Exception:
        logger.exception(f"Fetching scan result {scan_id} failed")
        return error_response("Failed to fetch scan result", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not result:
        raise NotFoundError("Scan result not found")

    return api_response(result)
