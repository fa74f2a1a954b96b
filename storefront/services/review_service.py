# storefront/services/review_service.py
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.review import ReviewModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import NotFoundError
from storefront.domain.ids import new_id
from storefront.domain.schemas import ReviewCreate
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.review_repo import ReviewRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ReviewRepo(db)
        self.products = ProductRepo(db)
        self.orders = OrderRepo(db)

    def list_reviews(self, product_id: str, limit: int = 10, offset: int = 0) -> dict:
        return {
            "reviews": self.repo.list_for_product(product_id, limit, offset),
            "total": self.repo.count_for_product(product_id),
        }

    def create_review(self, user: UserModel, payload: ReviewCreate) -> str:
        # brak unikalnosci (user, product): kilka recenzji jednego produktu jest dozwolone
        with transaction(self.db):
            product = self.products.get_product_for_update(payload.product_id)
            if not product:
                raise NotFoundError("Product not found")

            review = self.repo.add_review(
                ReviewModel(
                    id=new_id("rev"),
                    product_id=product.id,
                    user_id=user.id,
                    rating=payload.rating,
                    title=payload.title,
                    content=payload.content,
                    verified=self.orders.user_bought_product(user.id, product.id),
                )
            )

            avg, count = self.repo.rating_stats(product.id)
            self.products.update_rating(product.id, avg, count)

        logger.info(f"Review {review.id} for product {product.id}, rating now {avg:.2f} ({count})")
        return review.id
