from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from accessaudit.features.checklist.schemas.checklist import ChecklistItem, ChecklistItemCreate
from accessaudit.features.knowledge.schemas.knowledge import KnowledgeArticle, KnowledgeArticleCreate
from accessaudit.features.reports.models.report_request import RequestStatus
from accessaudit.features.reports.schemas.report_request import ReportRequest, ReportRequestCreate
from accessaudit.features.scan.schemas.scan import ScanCreate, ScanResult
from accessaudit.platform.exceptions import NotFoundError
from accessaudit.platform.storage.base import Store, matches_query


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStore(Store):
    """
    Dict-backed store. Contents and id counters live as long as the process.

    Callers get copies, so stored records change only through the store.
    Concurrent toggles of the same checklist item are last-write-wins.
    """

    backend = "memory"

    def __init__(self):
        self._scans: Dict[int, ScanResult] = {}
        self._report_requests: Dict[int, ReportRequest] = {}
        self._checklist_items: Dict[int, ChecklistItem] = {}
        self._articles: Dict[int, KnowledgeArticle] = {}
        self._counters: Dict[str, int] = {}

    def _next_id(self, kind: str) -> int:
        self._counters[kind] = self._counters.get(kind, 0) + 1
        return self._counters[kind]

    async def create_scan(self, data: ScanCreate) -> ScanResult:
        scan = ScanResult(
            **data.model_dump(exclude={"wcag_level"}),
            id=self._next_id("scans"),
            created_at=_utcnow(),
        )
        self._scans[scan.id] = scan
        return scan.model_copy(deep=True)

    async def list_scans(self) -> List[ScanResult]:
        return [scan.model_copy(deep=True) for scan in self._scans.values()]

    async def get_scan(self, scan_id: int) -> Optional[ScanResult]:
        scan = self._scans.get(scan_id)
        return scan.model_copy(deep=True) if scan else None

    async def create_report_request(self, data: ReportRequestCreate) -> ReportRequest:
        request = ReportRequest(
            **data.model_dump(),
            id=self._next_id("report_requests"),
            status=RequestStatus.PENDING,
            created_at=_utcnow(),
        )
        self._report_requests[request.id] = request
        return request.model_copy()

    async def list_report_requests(self) -> List[ReportRequest]:
        return [request.model_copy() for request in self._report_requests.values()]

    async def list_checklist_items(self, category: Optional[str] = None) -> List[ChecklistItem]:
        items = [item.model_copy() for item in self._checklist_items.values()]
        if category:
            return [item for item in items if item.category.value == category]
        return items

    async def update_checklist_item(self, item_id: int, is_completed: bool) -> ChecklistItem:
        item = self._checklist_items.get(item_id)
        if item is None:
            raise NotFoundError("Checklist item not found")
        updated = item.model_copy(update={"is_completed": is_completed})
        self._checklist_items[item_id] = updated
        return updated.model_copy()

    async def list_knowledge_articles(self, category: Optional[str] = None) -> List[KnowledgeArticle]:
        articles = [article.model_copy() for article in self._articles.values()]
        if category:
            return [article for article in articles if article.category == category]
        return sorted(articles, key=lambda a: (a.created_at, a.id), reverse=True)

    async def search_knowledge_articles(self, query: str) -> List[KnowledgeArticle]:
        return [article.model_copy() for article in self._articles.values() if matches_query(article, query)]

    async def seed_catalog(
        self,
        checklist_items: Sequence[ChecklistItemCreate],
        articles: Sequence[KnowledgeArticleCreate],
    ) -> bool:
        if self._checklist_items:
            return False

        for item in checklist_items:
            record = ChecklistItem(**item.model_dump(), id=self._next_id("checklist_items"))
            self._checklist_items[record.id] = record

        for article in articles:
            record = KnowledgeArticle(
                **article.model_dump(),
                id=self._next_id("knowledge_articles"),
                created_at=_utcnow(),
            )
            self._articles[record.id] = record

        return True
