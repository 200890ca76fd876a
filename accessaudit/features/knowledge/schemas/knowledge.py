from datetime import datetime

from pydantic import Field

from accessaudit.platform.schemas import CamelModel


class KnowledgeArticleCreate(CamelModel):
    title: str
    content: str
    category: str
    read_time: int = Field(..., ge=0, description="Estimated read time in minutes")


class KnowledgeArticle(KnowledgeArticleCreate):
    id: int
    created_at: datetime
