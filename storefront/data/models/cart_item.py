from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint

from storefront.data.database import Base
from storefront.data.models._common import utcnow


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    # slaba referencja, bez FK do products
    product_id = Column(String(64), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (UniqueConstraint("user_id", "product_id", name="u_cart_user_product"),)
