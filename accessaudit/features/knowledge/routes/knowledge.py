from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from accessaudit.features.knowledge.schemas.knowledge import KnowledgeArticle
from accessaudit.features.knowledge.services.knowledge import KnowledgeBaseService
from accessaudit.platform.dependencies import get_knowledge_service
from accessaudit.platform.logger import get_logger
from accessaudit.platform.response import api_response, error_response

router = APIRouter(tags=["Knowledge Base"])
logger = get_logger(__name__)


@router.get("/knowledge", response_model=list[KnowledgeArticle], status_code=status.HTTP_200_OK)
async def list_knowledge_articles(
    category: Optional[str] = None,
    q: Optional[str] = Query(None, description="Case-insensitive search over title, content and category"),
    service: KnowledgeBaseService = Depends(get_knowledge_service),
):
    try:
        articles = await service.list(category=category, query=q)
    except Exception:
        logger.exception("Fetching knowledge articles failed")
        return error_response("Failed to fetch knowledge articles", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return api_response(articles)
