from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, Numeric, JSON

from storefront.data.database import Base
from storefront.data.models._common import utcnow


class MerchantProfileModel(Base):
    __tablename__ = "merchant_profiles"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), unique=True, nullable=False)
    store_name = Column(String(255), nullable=False)
    store_description = Column(Text, nullable=True)
    logo = Column(Text, nullable=True)
    banner = Column(Text, nullable=True)
    phone = Column(String(20), nullable=True)
    address = Column(JSON, nullable=True)

    verified = Column(Boolean, nullable=False, default=False)
    rating = Column(Numeric(3, 2), nullable=False, default=0)
    total_sales = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
