from sqlalchemy import Column, String, Text, Integer, DateTime, Enum, JSON
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._common import utcnow

ORDER_STATUSES = (
    "pending",
    "confirmed",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
    "refunded",
)
PAYMENT_METHODS = ("credit_card", "paypal", "apple_pay", "bank_transfer")
PAYMENT_STATUSES = ("pending", "completed", "failed", "refunded")


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    order_number = Column(String(50), unique=True, nullable=False)

    status = Column(Enum(*ORDER_STATUSES, name="order_status"), nullable=False, default="pending")

    # wszystko w centach, total = subtotal + tax + shipping - discount
    subtotal = Column(Integer, nullable=False)
    tax = Column(Integer, nullable=False, default=0)
    shipping = Column(Integer, nullable=False, default=0)
    discount = Column(Integer, nullable=False, default=0)
    total = Column(Integer, nullable=False)

    promo_code = Column(String(50), nullable=True)
    payment_method = Column(Enum(*PAYMENT_METHODS, name="payment_method"), nullable=True)
    payment_status = Column(
        Enum(*PAYMENT_STATUSES, name="payment_status"), nullable=False, default="pending"
    )

    shipping_address = Column(JSON, nullable=False)
    billing_address = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)
    tracking_number = Column(String(100), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
    )
