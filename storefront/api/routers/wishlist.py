# storefront/api/routers/wishlist.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import SuccessOut, WishlistAdd, WishlistItemOut
from storefront.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("", response_model=List[WishlistItemOut])
def get_items(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return WishlistService(db).get_items(user.id)


@router.post("", response_model=SuccessOut)
def add_item(
    payload: WishlistAdd,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    WishlistService(db).add_item(user.id, payload.product_id)
    return {"success": True}


@router.delete("/{product_id}", response_model=SuccessOut)
def remove_item(
    product_id: str,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    WishlistService(db).remove_item(user.id, product_id)
    return {"success": True}
