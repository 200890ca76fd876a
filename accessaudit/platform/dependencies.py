import random

from fastapi import Depends, Request

from accessaudit.features.checklist.services.checklist import ChecklistService
from accessaudit.features.knowledge.services.knowledge import KnowledgeBaseService
from accessaudit.features.reports.services.report_request import ReportRequestService
from accessaudit.features.scan.services.scanner import ScanStubService
from accessaudit.platform.storage.base import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_random_source(request: Request) -> random.Random:
    return request.app.state.random_source


def get_scan_service(rng: random.Random = Depends(get_random_source)) -> ScanStubService:
    return ScanStubService(rng)


def get_report_request_service(store: Store = Depends(get_store)) -> ReportRequestService:
    return ReportRequestService(store)


def get_checklist_service(store: Store = Depends(get_store)) -> ChecklistService:
    return ChecklistService(store)


def get_knowledge_service(store: Store = Depends(get_store)) -> KnowledgeBaseService:
    return KnowledgeBaseService(store)
