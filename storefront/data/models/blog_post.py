from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON

from storefront.data.database import Base
from storefront.data.models._common import utcnow


class BlogPostModel(Base):
    __tablename__ = "blog_posts"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)
    excerpt = Column(String(500), nullable=True)
    content = Column(Text, nullable=True)
    image = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)
    tags = Column(JSON, nullable=True)
    author = Column(String(255), nullable=True)

    published = Column(Boolean, nullable=False, default=False)
    view_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
