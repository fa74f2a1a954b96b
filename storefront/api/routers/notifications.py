# storefront/api/routers/notifications.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import NotificationListOut, SuccessOut
from storefront.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListOut)
def list_notifications(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return NotificationService(db).list_notifications(user.id, limit, offset)


@router.post("/{notification_id}/read", response_model=SuccessOut)
def mark_as_read(
    notification_id: str,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    NotificationService(db).mark_as_read(user.id, notification_id)
    return {"success": True}
