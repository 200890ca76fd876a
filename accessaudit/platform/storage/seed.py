from accessaudit.features.checklist.catalog import DEFAULT_CHECKLIST_ITEMS
from accessaudit.features.knowledge.catalog import DEFAULT_KNOWLEDGE_ARTICLES
from accessaudit.platform.logger import get_logger
from accessaudit.platform.storage.base import Store

logger = get_logger(__name__)


async def seed_store(store: Store) -> bool:
    """Load the default checklist and knowledge catalogs if the store is empty."""
    seeded = await store.seed_catalog(DEFAULT_CHECKLIST_ITEMS, DEFAULT_KNOWLEDGE_ARTICLES)
    if seeded:
        logger.info(
            f"Seeded {len(DEFAULT_CHECKLIST_ITEMS)} checklist items and "
            f"{len(DEFAULT_KNOWLEDGE_ARTICLES)} knowledge articles ({store.backend})"
        )
    else:
        logger.info(f"Catalog already seeded ({store.backend})")
    return seeded
