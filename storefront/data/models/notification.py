from sqlalchemy import Column, String, Text, Boolean, DateTime, Enum

from storefront.data.database import Base
from storefront.data.models._common import utcnow

NOTIFICATION_TYPES = ("order_status", "promotion", "review_request", "system", "message")


class NotificationModel(Base):
    __tablename__ = "notifications"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    type = Column(Enum(*NOTIFICATION_TYPES, name="notification_type"), nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    read = Column(Boolean, nullable=False, default=False)
    action_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
