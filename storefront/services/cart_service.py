# storefront/services/cart_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import NotFoundError
from storefront.domain.ids import new_id
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk = jeden wiersz na (user, product)
    commands (add, update, remove, clear) modyfikuja stan
    query (get) tylko odczyt
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_items(self, user_id: str) -> list[dict]:
        items = self.repo.get_cart_items(user_id)

        # kazdy wiersz koszyka = osobny lookup produktu
        return [
            {
                "id": i.id,
                "user_id": i.user_id,
                "product_id": i.product_id,
                "quantity": i.quantity,
                "added_at": i.added_at,
                "product": self.products.get_product(i.product_id),
            }
            for i in items
        ]

    #commands
    def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> None:
        quantity = max(1, quantity)

        try:
            self._upsert(user_id, product_id, quantity)
        except IntegrityError:
            # rownolegly insert tej samej pary wygral, zwiekszamy jego ilosc
            logger.info(f"Cart row for {user_id}/{product_id} inserted concurrently, retrying as update")
            self._upsert(user_id, product_id, quantity)

    def _upsert(self, user_id: str, product_id: str, quantity: int) -> None:
        with transaction(self.db):
            existing = self.repo.get_item_for_product(user_id, product_id)

            if existing:
                logger.info(
                    f"Product {product_id} already in cart of {user_id}, "
                    f"quantity {existing.quantity} -> {existing.quantity + quantity}"
                )
                existing.quantity += quantity
            else:
                logger.info(f"Adding product {product_id} to cart of {user_id}")
                self.repo.add_cart_item(
                    CartItemModel(
                        id=new_id("cart"),
                        user_id=user_id,
                        product_id=product_id,
                        quantity=quantity,
                    )
                )

    def update_item(self, user_id: str, item_id: str, quantity: int) -> None:
        with transaction(self.db):
            item = self.repo.get_cart_item(user_id, item_id)
            if not item:
                raise NotFoundError("Cart item not found")

            # quantity <= 0 oznacza usuniecie
            if quantity <= 0:
                self.repo.delete_cart_item(item)
            else:
                item.quantity = quantity

    def remove_item(self, user_id: str, item_id: str) -> None:
        with transaction(self.db):
            item = self.repo.get_cart_item(user_id, item_id)
            if not item:
                raise NotFoundError("Cart item not found")
            self.repo.delete_cart_item(item)

    def clear(self, user_id: str) -> int:
        with transaction(self.db):
            removed = self.repo.clear_cart(user_id)
        logger.info(f"Cleared {removed} cart items of {user_id}")
        return removed
