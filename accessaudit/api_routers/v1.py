from fastapi import APIRouter

from accessaudit.features.checklist.routes.checklist import router as checklist_router
from accessaudit.features.knowledge.routes.knowledge import router as knowledge_router
from accessaudit.features.reports.routes.report_request import router as report_request_router
from accessaudit.features.scan.routes.scan import router as scan_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(scan_router)
api_router.include_router(report_request_router)
api_router.include_router(checklist_router)
api_router.include_router(knowledge_router)
