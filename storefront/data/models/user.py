from sqlalchemy import Column, String, Text, DateTime, Enum

from storefront.data.database import Base
from storefront.data.models._common import utcnow

ROLES = ("user", "merchant", "admin")


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=True)
    email = Column(String(320), unique=True, nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(Enum(*ROLES, name="user_role"), nullable=False, default="user")
    phone = Column(String(20), nullable=True)
    avatar = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_signed_in = Column(DateTime(timezone=True), nullable=False, default=utcnow)
