# storefront/api/deps.py
from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from storefront.api.security import decode_session_token
from storefront.data.models.user import UserModel
from storefront.domain.errors import DatabaseUnavailableError, UnauthorizedError
from storefront.repos.user_repo import UserRepo
from storefront.utils.settings import SESSION_COOKIE_NAME
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

bearer = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Iterator[Session]:
    yield from request.app.state.database.session()


def _session_user(
    request: Request,
    cred: Optional[HTTPAuthorizationCredentials],
    db: Session,
) -> Optional[UserModel]:
    """Tozsamosc z cookie sesji albo z naglowka Bearer, anonim = None."""
    token = request.cookies.get(SESSION_COOKIE_NAME) or (cred.credentials if cred else None)
    if not token:
        return None

    payload = decode_session_token(token)
    if not payload or not payload.get("sub"):
        return None

    return UserRepo(db).get_user(str(payload["sub"]))


def get_optional_user(
    request: Request,
    cred: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
) -> Optional[UserModel]:
    try:
        return _session_user(request, cred, db)
    except OperationalError as e:
        # publiczne odczyty dzialaja dalej jako anonim
        logger.warning(f"[Auth] Cannot resolve session user: database not available ({e.orig})")
        db.rollback()
        return None


def get_current_user(
    request: Request,
    cred: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
) -> UserModel:
    try:
        user = _session_user(request, cred, db)
    except OperationalError as e:
        db.rollback()
        raise DatabaseUnavailableError() from e

    if user is None:
        raise UnauthorizedError()
    return user
