# storefront/api/routers/products.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import (
    IdOut,
    ProductCreate,
    ProductListOut,
    ProductOut,
    ProductSort,
    ProductUpdate,
    SuccessOut,
)
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.get("", response_model=ProductListOut)
def list_products(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = Query(None, ge=0, description="Major units, wlacznie"),
    max_price: Optional[float] = Query(None, ge=0, description="Major units, wlacznie"),
    featured: Optional[bool] = None,
    sort: ProductSort = "newest",
    db: Session = Depends(get_db),
):
    return get_service(db).list_products(
        limit=limit,
        offset=offset,
        search=search,
        category=category,
        min_price=min_price,
        max_price=max_price,
        featured=featured,
        sort=sort,
    )


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return get_service(db).get_product(product_id)


@router.post("", response_model=IdOut, status_code=201)
def create_product(
    payload: ProductCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"id": get_service(db).create_product(user, payload)}


@router.patch("/{product_id}", response_model=SuccessOut)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).update_product(user, product_id, payload)
    return {"success": True}
