# storefront/api/routers/blog.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import BlogListOut, BlogPostCreate, BlogPostOut, IdOut
from storefront.services.blog_service import BlogService

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_model=BlogListOut)
def list_posts(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    return BlogService(db).list_posts(limit, offset)


@router.get("/{slug}", response_model=BlogPostOut)
def get_post(slug: str, db: Session = Depends(get_db)):
    return BlogService(db).get_post(slug)


@router.post("", response_model=IdOut, status_code=201)
def create_post(
    payload: BlogPostCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"id": BlogService(db).create_post(user, payload)}
