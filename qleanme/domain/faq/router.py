"""FAQ router - help screen content"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...cache import get_faq_cached, set_faq_cached
from ...database import get_db
from ...models import FAQ

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/faq", tags=["FAQ"])


class FAQItem(BaseModel):
    id: int
    question: str
    answer: str


@router.get("", response_model=list[FAQItem])
async def get_faq(db: Session = Depends(get_db)):
    """All questions in display order; served from Redis when cached"""
    cached_items = get_faq_cached()
    if cached_items is not None:
        return cached_items

    try:
        rows = db.query(FAQ).order_by(FAQ.id).all()
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to load FAQs: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load FAQs: {e}") from e

    items = [{"id": r.id, "question": r.question, "answer": r.answer} for r in rows]
    set_faq_cached(items)
    return items
