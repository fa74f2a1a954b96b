# storefront/services/blog_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.blog_post import BlogPostModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import ConflictError, NotFoundError
from storefront.domain.ids import new_id
from storefront.domain.schemas import BlogPostCreate
from storefront.repos.blog_repo import BlogRepo
from storefront.services.access import ensure_role, ADMIN
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class BlogService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = BlogRepo(db)

    def list_posts(self, limit: int = 10, offset: int = 0) -> dict:
        return {
            "posts": self.repo.list_published(limit, offset),
            "total": self.repo.count_published(),
        }

    def get_post(self, slug: str) -> BlogPostModel:
        post = self.repo.get_published_by_slug(slug)
        if not post:
            raise NotFoundError("Post not found")
        return post

    def create_post(self, user: UserModel, payload: BlogPostCreate) -> str:
        ensure_role(user, ADMIN)

        post = BlogPostModel(
            id=new_id("blog"),
            author=user.name or "Admin",
            **payload.model_dump(),
        )
        try:
            with transaction(self.db):
                if self.repo.slug_exists(payload.slug):
                    raise ConflictError(f"Slug {payload.slug} is already taken")
                self.repo.add_post(post)
        except IntegrityError:
            raise ConflictError(f"Slug {payload.slug} is already taken")

        logger.info(f"Blog post {post.id} ({post.slug}) created")
        return post.id
