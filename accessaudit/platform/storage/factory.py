from accessaudit.platform.config import Settings
from accessaudit.platform.db.session import build_engine
from accessaudit.platform.storage.base import Store
from accessaudit.platform.storage.database import DatabaseStore
from accessaudit.platform.storage.memory import MemoryStore


async def build_store(settings: Settings) -> Store:
    """Construct the single store this process will use."""
    if settings.STORAGE_BACKEND == "memory":
        return MemoryStore()

    if settings.STORAGE_BACKEND == "database":
        engine = build_engine(settings.async_database_url, echo=settings.DATABASE_ECHO)
        store = DatabaseStore(engine)
        await store.init_schema()
        return store

    raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND}")
