from sqlalchemy import Column, String, Text, DateTime, Enum

from storefront.data.database import Base
from storefront.data.models._common import utcnow

CONTACT_STATUSES = ("new", "read", "responded", "closed")


class ContactSubmissionModel(Base):
    __tablename__ = "contact_submissions"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    phone = Column(String(20), nullable=True)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)

    status = Column(Enum(*CONTACT_STATUSES, name="contact_status"), nullable=False, default="new")
    response = Column(Text, nullable=True)
    responded_by = Column(String(64), nullable=True)
    responded_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
