# storefront/repos/wishlist_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.wishlist_item import WishlistItemModel


class WishlistRepo:
    def __init__(self, db: Session):
        self.db = db

    @soft_read(list)
    def get_items(self, user_id: str) -> list[WishlistItemModel]:
        stmt = (
            select(WishlistItemModel)
            .where(WishlistItemModel.user_id == user_id)
            .order_by(WishlistItemModel.added_at, WishlistItemModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_item(self, user_id: str, product_id: str) -> WishlistItemModel | None:
        return self.db.execute(
            select(WishlistItemModel).where(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def add_item(self, item: WishlistItemModel) -> WishlistItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def remove_item(self, user_id: str, product_id: str) -> int:
        result = self.db.execute(
            delete(WishlistItemModel)
            .where(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
