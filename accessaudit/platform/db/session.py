from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from accessaudit.platform.db.base import Base


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    kwargs = {"echo": echo, "future": True, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        kwargs.update(pool_recycle=1800, pool_size=20, max_overflow=30, pool_timeout=30)
    return create_async_engine(database_url, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False, autocommit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table registered on Base that does not exist yet."""
    # Registers the tables on Base.metadata
    from accessaudit.features.checklist.models.checklist_item import ChecklistItemRecord  # noqa: F401
    from accessaudit.features.knowledge.models.knowledge_article import KnowledgeArticleRecord  # noqa: F401
    from accessaudit.features.reports.models.report_request import ReportRequestRecord  # noqa: F401
    from accessaudit.features.scan.models.scan_result import ScanResultRecord  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
