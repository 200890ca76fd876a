from sqlalchemy import Column, Integer, String, Text

from accessaudit.platform.db.base import BaseModel


class KnowledgeArticleRecord(BaseModel):
    __tablename__ = "knowledge_articles"

    title = Column(String(512), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    read_time = Column(Integer, nullable=False)
