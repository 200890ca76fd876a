from typing import List, Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from accessaudit.features.checklist.models.checklist_item import ChecklistItemRecord
from accessaudit.features.checklist.schemas.checklist import ChecklistItem, ChecklistItemCreate
from accessaudit.features.knowledge.models.knowledge_article import KnowledgeArticleRecord
from accessaudit.features.knowledge.schemas.knowledge import KnowledgeArticle, KnowledgeArticleCreate
from accessaudit.features.reports.models.report_request import ReportRequestRecord, RequestStatus
from accessaudit.features.reports.schemas.report_request import ReportRequest, ReportRequestCreate
from accessaudit.features.scan.models.scan_result import ScanResultRecord
from accessaudit.features.scan.schemas.scan import ScanCreate, ScanResult
from accessaudit.platform.db.base import MAX_ID
from accessaudit.platform.db.session import build_sessionmaker, create_schema
from accessaudit.platform.exceptions import NotFoundError
from accessaudit.platform.logger import get_logger
from accessaudit.platform.storage.base import Store, matches_query

logger = get_logger(__name__)


def _storable_id(value: int) -> bool:
    # Ids the column cannot hold cannot exist; the driver would raise OverflowError
    return 1 <= value <= MAX_ID


class DatabaseStore(Store):
    """
    SQLAlchemy-backed store. Identity columns and rows survive restarts.

    Each operation runs in its own session; atomicity is the database's
    single-row insert/update guarantee.
    """

    backend = "database"

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.SessionLocal: async_sessionmaker = build_sessionmaker(engine)

    async def init_schema(self) -> None:
        await create_schema(self.engine)

    # ── Scans ───────────────────────────────────
    async def create_scan(self, data: ScanCreate) -> ScanResult:
        payload = data.model_dump(mode="json", by_alias=True)
        record = ScanResultRecord(
            url=data.url,
            ip_address=data.ip_address,
            scan_type=data.scan_type,
            score=data.score,
            issues=payload["issues"],
            recommendations=payload["recommendations"],
            wcag_level=data.wcag_level,
        )
        async with self.SessionLocal() as db:
            db.add(record)
            try:
                await db.commit()
                await db.refresh(record)
            except Exception:
                await db.rollback()
                raise
            return ScanResult.model_validate(record)

    async def list_scans(self) -> List[ScanResult]:
        async with self.SessionLocal() as db:
            result = await db.execute(select(ScanResultRecord).order_by(ScanResultRecord.id))
            return [ScanResult.model_validate(row) for row in result.scalars().all()]

    async def get_scan(self, scan_id: int) -> Optional[ScanResult]:
        if not _storable_id(scan_id):
            return None
        async with self.SessionLocal() as db:
            record = await db.get(ScanResultRecord, scan_id)
            return ScanResult.model_validate(record) if record else None

    # ── Report requests ─────────────────────────
    async def create_report_request(self, data: ReportRequestCreate) -> ReportRequest:
        record = ReportRequestRecord(
            scan_id=data.scan_id,
            name=data.name,
            email=data.email,
            company=data.company,
            message=data.message,
            requested_format=data.requested_format.value,
            status=RequestStatus.PENDING.value,
        )
        async with self.SessionLocal() as db:
            db.add(record)
            try:
                await db.commit()
                await db.refresh(record)
            except Exception:
                await db.rollback()
                raise
            return ReportRequest.model_validate(record)

    async def list_report_requests(self) -> List[ReportRequest]:
        async with self.SessionLocal() as db:
            result = await db.execute(select(ReportRequestRecord).order_by(ReportRequestRecord.id))
            return [ReportRequest.model_validate(row) for row in result.scalars().all()]

    # ── Checklist ───────────────────────────────
    async def list_checklist_items(self, category: Optional[str] = None) -> List[ChecklistItem]:
        query = select(ChecklistItemRecord).order_by(ChecklistItemRecord.id)
        if category:
            query = query.where(ChecklistItemRecord.category == category)
        async with self.SessionLocal() as db:
            result = await db.execute(query)
            return [ChecklistItem.model_validate(row) for row in result.scalars().all()]

    async def update_checklist_item(self, item_id: int, is_completed: bool) -> ChecklistItem:
        if not _storable_id(item_id):
            raise NotFoundError("Checklist item not found")
        stmt = (
            update(ChecklistItemRecord)
            .where(ChecklistItemRecord.id == item_id)
            .values(is_completed=is_completed)
        )
        async with self.SessionLocal() as db:
            result = await db.execute(stmt)
            if result.rowcount == 0:
                await db.rollback()
                raise NotFoundError("Checklist item not found")
            await db.commit()
            record = await db.get(ChecklistItemRecord, item_id, populate_existing=True)
            return ChecklistItem.model_validate(record)

    # ── Knowledge base ──────────────────────────
    async def list_knowledge_articles(self, category: Optional[str] = None) -> List[KnowledgeArticle]:
        if category:
            query = (
                select(KnowledgeArticleRecord)
                .where(KnowledgeArticleRecord.category == category)
                .order_by(KnowledgeArticleRecord.id)
            )
        else:
            query = select(KnowledgeArticleRecord).order_by(
                KnowledgeArticleRecord.created_at.desc(), KnowledgeArticleRecord.id.desc()
            )
        async with self.SessionLocal() as db:
            result = await db.execute(query)
            return [KnowledgeArticle.model_validate(row) for row in result.scalars().all()]

    async def search_knowledge_articles(self, query: str) -> List[KnowledgeArticle]:
        # Filtered in Python so case folding is identical to MemoryStore on every dialect
        async with self.SessionLocal() as db:
            result = await db.execute(select(KnowledgeArticleRecord).order_by(KnowledgeArticleRecord.id))
            articles = [KnowledgeArticle.model_validate(row) for row in result.scalars().all()]
        return [article for article in articles if matches_query(article, query)]

    # ── Lifecycle ───────────────────────────────
    async def seed_catalog(
        self,
        checklist_items: Sequence[ChecklistItemCreate],
        articles: Sequence[KnowledgeArticleCreate],
    ) -> bool:
        async with self.SessionLocal() as db:
            existing = await db.scalar(select(func.count()).select_from(ChecklistItemRecord))
            if existing:
                return False

            db.add_all(
                ChecklistItemRecord(
                    category=item.category.value,
                    title=item.title,
                    description=item.description,
                    wcag_reference=item.wcag_reference,
                    is_completed=item.is_completed,
                )
                for item in checklist_items
            )
            db.add_all(
                KnowledgeArticleRecord(
                    title=article.title,
                    content=article.content,
                    category=article.category,
                    read_time=article.read_time,
                )
                for article in articles
            )
            try:
                await db.commit()
            except Exception as exc:
                logger.exception("Failed to seed catalog", exc_info=exc)
                await db.rollback()
                raise
        return True

    async def close(self) -> None:
        await self.engine.dispose()
