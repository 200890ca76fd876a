from accessaudit.platform.storage.base import Store
from accessaudit.platform.storage.database import DatabaseStore
from accessaudit.platform.storage.factory import build_store
from accessaudit.platform.storage.memory import MemoryStore

__all__ = ["Store", "MemoryStore", "DatabaseStore", "build_store"]
