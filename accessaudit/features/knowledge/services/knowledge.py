from typing import List, Optional

from accessaudit.features.knowledge.schemas.knowledge import KnowledgeArticle
from accessaudit.platform.storage.base import Store


class KnowledgeBaseService:
    def __init__(self, store: Store):
        self.store = store

    async def list(self, category: Optional[str] = None, query: Optional[str] = None) -> List[KnowledgeArticle]:
        """
        A non-blank query searches every article and ignores category.
        Otherwise filter by category, or return everything newest first.
        """
        if query and query.strip():
            return await self.store.search_knowledge_articles(query.strip())
        return await self.store.list_knowledge_articles(category)
