from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime

from storefront.data.database import Base
from storefront.data.models._common import utcnow


class ReviewModel(Base):
    __tablename__ = "reviews"

    id = Column(String(64), primary_key=True)
    product_id = Column(String(64), nullable=False, index=True)
    user_id = Column(String(64), nullable=False)

    rating = Column(Integer, nullable=False)  # 1-5
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=True)
    verified = Column(Boolean, nullable=False, default=False)  # zweryfikowany zakup
    helpful = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
