# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import (
    OrderCreate,
    OrderCreated,
    OrderDetailOut,
    OrderListOut,
    OrderStatusUpdate,
    SuccessOut,
)
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("", response_model=OrderListOut)
def list_orders(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).list_orders(user.id, limit, offset)


@router.get("/{order_id}", response_model=OrderDetailOut)
def get_order(
    order_id: str,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Zamowienie z pozycjami, tylko dla wlasciciela albo admina.
    """
    return get_service(db).get_order(user, order_id)


@router.post("", response_model=OrderCreated, status_code=201)
def create_order(
    payload: OrderCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Sklada zamowienie z podanych pozycji i czysci koszyk.
    Kwoty liczone po stronie serwera.
    """
    return get_service(db).create_order(user, payload)


@router.patch("/{order_id}/status", response_model=SuccessOut)
def update_status(
    order_id: str,
    payload: OrderStatusUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).update_status(user, order_id, payload.status)
    return {"success": True}
