# storefront/services/access.py
from storefront.data.models.user import UserModel
from storefront.domain.errors import ForbiddenError

ADMIN = "admin"
MERCHANT = "merchant"


def ensure_role(user: UserModel, *roles: str) -> None:
    if user.role not in roles:
        raise ForbiddenError()


def is_admin(user: UserModel) -> bool:
    return user.role == ADMIN
