# storefront/services/user_service.py
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models._common import utcnow
from storefront.data.models.user import UserModel
from storefront.domain.schemas import UserUpsert
from storefront.repos.user_repo import UserRepo
from storefront.utils.settings import OWNER_USER_ID
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_PROFILE_FIELDS = ("name", "email", "login_method", "phone", "avatar")


class UserService:
    def __init__(self, db: Session, owner_id: str = OWNER_USER_ID):
        self.db = db
        self.repo = UserRepo(db)
        self.owner_id = owner_id

    def upsert_user(self, payload: UserUpsert) -> UserModel:
        """
        Insert albo update po id, wywolywane przez zewnetrzny login.
        Tylko pola podane w payload sa nadpisywane.
        """
        data = payload.model_dump(exclude_unset=True)
        role = data.get("role")
        if role is None and self.owner_id and payload.id == self.owner_id:
            role = "admin"

        with transaction(self.db):
            user = self.repo.get_user(payload.id)
            if user is None:
                user = self.repo.create_user(UserModel(id=payload.id, role=role or "user"))
                logger.info(f"Created user {user.id} with role {user.role}")
            elif role is not None:
                user.role = role

            for field in _PROFILE_FIELDS:
                if field in data:
                    setattr(user, field, data[field])
            user.last_signed_in = data.get("last_signed_in") or utcnow()

        return user
