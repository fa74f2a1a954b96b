from sqlalchemy import Column, String, DateTime, UniqueConstraint

from storefront.data.database import Base
from storefront.data.models._common import utcnow


class WishlistItemModel(Base):
    __tablename__ = "wishlist_items"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    product_id = Column(String(64), nullable=False)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (UniqueConstraint("user_id", "product_id", name="u_wishlist_user_product"),)
