# storefront/services/notification_service.py
from kombu.exceptions import OperationalError as BrokerError
from sqlalchemy.orm import Session

from storefront.celery_worker import celery_app
from storefront.data.database import transaction
from storefront.data.models.notification import NotificationModel
from storefront.domain.errors import NotFoundError
from storefront.domain.ids import new_id
from storefront.repos.notification_repo import NotificationRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia uzytkownika:
    - zapis w tabeli notifications (w transakcji wywolujacego)
    - dostarczenie (email/push) asynchronicznie przez Celery
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepo(db)

    def record(
        self,
        user_id: str,
        kind: str,
        title: str,
        content: str | None = None,
        action_url: str | None = None,
    ) -> NotificationModel:
        """Dodaje wiersz bez commita, commit robi transakcja wywolujacego."""
        return self.repo.add_notification(
            NotificationModel(
                id=new_id("notif"),
                user_id=user_id,
                type=kind,
                title=title,
                content=content,
                action_url=action_url,
            )
        )

    def list_notifications(self, user_id: str, limit: int = 20, offset: int = 0) -> dict:
        return {
            "notifications": self.repo.get_user_notifications(user_id, limit, offset),
            "total": self.repo.count_user_notifications(user_id),
        }

    def mark_as_read(self, user_id: str, notification_id: str) -> None:
        with transaction(self.db):
            notification = self.repo.get_user_notification(user_id, notification_id)
            if not notification:
                raise NotFoundError("Notification not found")
            notification.read = True

    @staticmethod
    def dispatch(notification: NotificationModel) -> None:
        """Kolejkuje dostarczenie po commicie. Brak brokera nie cofa zamowienia."""
        try:
            deliver_notification_task.delay(
                notification.user_id,
                notification.type,
                notification.title,
                notification.content,
            )
        except BrokerError as e:
            logger.warning(f"Failed to queue notification {notification.id}: {e}")


@celery_app.task(name="storefront.services.notification_service.deliver_notification_task")
def deliver_notification_task(user_id: str, kind: str, title: str, content: str | None = None):
    """
    Celery task - docelowo email/SMS/push.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] User {user_id} ({kind}): {title}")
    return {"user_id": user_id, "type": kind, "status": "sent"}
