from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, Numeric, JSON

from storefront.data.database import Base
from storefront.data.models._common import utcnow


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    short_description = Column(String(500), nullable=True)

    # ceny w centach
    price = Column(Integer, nullable=False)
    original_price = Column(Integer, nullable=True)

    sku = Column(String(100), unique=True, nullable=True)
    category = Column(String(100), nullable=True, default="barley-powder", index=True)
    image = Column(Text, nullable=True)
    images = Column(JSON, nullable=True)
    nutrition_info = Column(JSON, nullable=True)
    ingredients = Column(Text, nullable=True)
    weight = Column(String(50), nullable=True)

    stock = Column(Integer, nullable=False, default=0)
    rating = Column(Numeric(3, 2), nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)

    featured = Column(Boolean, nullable=False, default=False)
    active = Column(Boolean, nullable=False, default=True)
    merchant_id = Column(String(64), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
