# storefront/repos/blog_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.blog_post import BlogPostModel


class BlogRepo:
    def __init__(self, db: Session):
        self.db = db

    @soft_read(list)
    def list_published(self, limit: int = 10, offset: int = 0) -> list[BlogPostModel]:
        stmt = (
            select(BlogPostModel)
            .where(BlogPostModel.published.is_(True))
            .order_by(BlogPostModel.created_at.desc(), BlogPostModel.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    @soft_read(lambda: 0)
    def count_published(self) -> int:
        return self.db.execute(
            select(func.count()).select_from(BlogPostModel).where(BlogPostModel.published.is_(True))
        ).scalar_one()

    @soft_read(lambda: None)
    def get_published_by_slug(self, slug: str) -> BlogPostModel | None:
        return self.db.execute(
            select(BlogPostModel).where(
                BlogPostModel.slug == slug,
                BlogPostModel.published.is_(True),
            )
        ).scalar_one_or_none()

    def slug_exists(self, slug: str) -> bool:
        return self.db.execute(
            select(BlogPostModel.id).where(BlogPostModel.slug == slug)
        ).first() is not None

    def add_post(self, post: BlogPostModel) -> BlogPostModel:
        self.db.add(post)
        self.db.flush()
        return post
