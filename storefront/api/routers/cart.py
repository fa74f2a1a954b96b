# storefront/api/routers/cart.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import CartItemIn, CartItemOut, CartItemUpdate, SuccessOut
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=List[CartItemOut])
def get_items(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return get_service(db).get_items(user.id)


@router.post("/items", response_model=SuccessOut)
def add_item(
    payload: CartItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).add_item(user.id, payload.product_id, payload.quantity)
    return {"success": True}


@router.patch("/items/{item_id}", response_model=SuccessOut)
def update_item(
    item_id: str,
    payload: CartItemUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).update_item(user.id, item_id, payload.quantity)
    return {"success": True}


@router.delete("/items/{item_id}", response_model=SuccessOut)
def remove_item(
    item_id: str,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).remove_item(user.id, item_id)
    return {"success": True}


@router.delete("", response_model=SuccessOut)
def clear(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    get_service(db).clear(user.id)
    return {"success": True}
