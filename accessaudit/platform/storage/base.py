"""
Store contract shared by the in-memory and relational backends.

Both backends return the same pydantic records, assign ids monotonically
per entity kind, and must pass the same contract tests.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from accessaudit.features.checklist.schemas.checklist import ChecklistItem, ChecklistItemCreate
from accessaudit.features.knowledge.schemas.knowledge import KnowledgeArticle, KnowledgeArticleCreate
from accessaudit.features.reports.schemas.report_request import ReportRequest, ReportRequestCreate
from accessaudit.features.scan.schemas.scan import ScanCreate, ScanResult


class Store(ABC):
    backend: str = ""

    # ── Scans ───────────────────────────────────
    @abstractmethod
    async def create_scan(self, data: ScanCreate) -> ScanResult:
        ...

    @abstractmethod
    async def list_scans(self) -> List[ScanResult]:
        """All scans in creation order."""

    @abstractmethod
    async def get_scan(self, scan_id: int) -> Optional[ScanResult]:
        ...

    # ── Report requests ─────────────────────────
    @abstractmethod
    async def create_report_request(self, data: ReportRequestCreate) -> ReportRequest:
        """Persist a request with status "pending". Does not check scan_id."""

    @abstractmethod
    async def list_report_requests(self) -> List[ReportRequest]:
        ...

    # ── Checklist ───────────────────────────────
    @abstractmethod
    async def list_checklist_items(self, category: Optional[str] = None) -> List[ChecklistItem]:
        ...

    @abstractmethod
    async def update_checklist_item(self, item_id: int, is_completed: bool) -> ChecklistItem:
        """Replace only the completion flag. Raises NotFoundError for unknown ids."""

    # ── Knowledge base ──────────────────────────
    @abstractmethod
    async def list_knowledge_articles(self, category: Optional[str] = None) -> List[KnowledgeArticle]:
        """
        Articles with an exact category match, or the whole catalog newest
        first when no category is given.
        """

    @abstractmethod
    async def search_knowledge_articles(self, query: str) -> List[KnowledgeArticle]:
        """Case-insensitive substring match on title, content or category, in insertion order."""

    # ── Lifecycle ───────────────────────────────
    @abstractmethod
    async def seed_catalog(
        self,
        checklist_items: Sequence[ChecklistItemCreate],
        articles: Sequence[KnowledgeArticleCreate],
    ) -> bool:
        """Insert the fixed catalogs unless checklist items already exist."""

    async def close(self) -> None:
        return None


def matches_query(article: KnowledgeArticle, query: str) -> bool:
    needle = query.lower()
    return (
        needle in article.title.lower()
        or needle in article.content.lower()
        or needle in article.category.lower()
    )
