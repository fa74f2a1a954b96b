from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, Enum

from storefront.data.database import Base
from storefront.data.models._common import utcnow

DISCOUNT_TYPES = ("percentage", "fixed")


class PromoCodeModel(Base):
    __tablename__ = "promo_codes"

    id = Column(String(64), primary_key=True)
    code = Column(String(50), unique=True, nullable=False)
    description = Column(Text, nullable=True)

    discount_type = Column(Enum(*DISCOUNT_TYPES, name="discount_type"), nullable=False)
    discount_value = Column(Integer, nullable=False)  # procent 0-100 albo centy
    min_purchase = Column(Integer, nullable=True, default=0)

    max_uses = Column(Integer, nullable=True)  # None = bez limitu
    current_uses = Column(Integer, nullable=False, default=0)

    active = Column(Boolean, nullable=False, default=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
