# storefront/repos/notification_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.notification import NotificationModel


class NotificationRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_notification(self, notification: NotificationModel) -> NotificationModel:
        self.db.add(notification)
        self.db.flush()
        return notification

    @soft_read(list)
    def get_user_notifications(self, user_id: str, limit: int = 20, offset: int = 0) -> list[NotificationModel]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    @soft_read(lambda: 0)
    def count_user_notifications(self, user_id: str) -> int:
        return self.db.execute(
            select(func.count()).select_from(NotificationModel).where(NotificationModel.user_id == user_id)
        ).scalar_one()

    def get_user_notification(self, user_id: str, notification_id: str) -> NotificationModel | None:
        return self.db.execute(
            select(NotificationModel).where(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
        ).scalar_one_or_none()
