# storefront/api/routers/reviews.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import IdOut, ReviewCreate, ReviewListOut
from storefront.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("", response_model=ReviewListOut)
def list_reviews(
    product_id: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    return ReviewService(db).list_reviews(product_id, limit, offset)


@router.post("", response_model=IdOut, status_code=201)
def create_review(
    payload: ReviewCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"id": ReviewService(db).create_review(user, payload)}
