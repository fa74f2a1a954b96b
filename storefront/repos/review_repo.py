# storefront/repos/review_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.review import ReviewModel


class ReviewRepo:
    def __init__(self, db: Session):
        self.db = db

    @soft_read(list)
    def list_for_product(self, product_id: str, limit: int = 10, offset: int = 0) -> list[ReviewModel]:
        stmt = (
            select(ReviewModel)
            .where(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    @soft_read(lambda: 0)
    def count_for_product(self, product_id: str) -> int:
        return self.db.execute(
            select(func.count()).select_from(ReviewModel).where(ReviewModel.product_id == product_id)
        ).scalar_one()

    def rating_stats(self, product_id: str) -> tuple[float, int]:
        avg, count = self.db.execute(
            select(func.avg(ReviewModel.rating), func.count(ReviewModel.id))
            .where(ReviewModel.product_id == product_id)
        ).one()
        return float(avg or 0), int(count)

    def add_review(self, review: ReviewModel) -> ReviewModel:
        self.db.add(review)
        self.db.flush()
        return review
