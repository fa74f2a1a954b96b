# storefront/api/routers/merchant.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import (
    IdOut,
    MerchantProfileCreate,
    MerchantProfileOut,
    MerchantProfileUpdate,
    ProductOut,
    SuccessOut,
)
from storefront.services.merchant_service import MerchantService
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/merchant", tags=["merchant"])


@router.get("/profile", response_model=Optional[MerchantProfileOut])
def get_profile(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return MerchantService(db).get_profile(user)


@router.post("/profile", response_model=IdOut, status_code=201)
def create_profile(
    payload: MerchantProfileCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"id": MerchantService(db).create_profile(user, payload)}


@router.patch("/profile", response_model=SuccessOut)
def update_profile(
    payload: MerchantProfileUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MerchantService(db).update_profile(user, payload)
    return {"success": True}


@router.get("/products", response_model=List[ProductOut])
def get_products(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return ProductService(db).merchant_products(user)
