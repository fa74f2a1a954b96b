# storefront/services/wishlist_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.domain.ids import new_id
from storefront.repos.product_repo import ProductRepo
from storefront.repos.wishlist_repo import WishlistRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = WishlistRepo(db)
        self.products = ProductRepo(db)

    def get_items(self, user_id: str) -> list[dict]:
        return [
            {
                "id": i.id,
                "user_id": i.user_id,
                "product_id": i.product_id,
                "added_at": i.added_at,
                "product": self.products.get_product(i.product_id),
            }
            for i in self.repo.get_items(user_id)
        ]

    def add_item(self, user_id: str, product_id: str) -> None:
        try:
            with transaction(self.db):
                if self.repo.get_item(user_id, product_id):
                    return
                self.repo.add_item(
                    WishlistItemModel(id=new_id("wish"), user_id=user_id, product_id=product_id)
                )
        except IntegrityError:
            # ten sam produkt dodany rownolegle, wynik jest taki sam
            logger.info(f"Wishlist row {user_id}/{product_id} already exists")

    def remove_item(self, user_id: str, product_id: str) -> None:
        with transaction(self.db):
            self.repo.remove_item(user_id, product_id)
