from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(String(64), primary_key=True)
    order_id = Column(String(64), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(64), nullable=False)

    # snapshot produktu z chwili zakupu
    product_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    subtotal = Column(Integer, nullable=False)  # price * quantity

    order = relationship("OrderModel", back_populates="items")
