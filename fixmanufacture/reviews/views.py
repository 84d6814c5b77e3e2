from typing import Any, Dict, List
from fastapi import APIRouter, Depends

from fixmanufacture.dependencies import get_reviews
from fixmanufacture.reviews.models import ReviewIn
from fixmanufacture.reviews.repository import ReviewsRepository

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("")
def list_reviews(reviews: ReviewsRepository = Depends(get_reviews)) -> List[Dict[str, Any]]:
    return reviews.list()


@router.post("")
def add_review(body: ReviewIn, reviews: ReviewsRepository = Depends(get_reviews)) -> Dict[str, Any]:
    return reviews.add(body.model_dump(exclude_none=True))
