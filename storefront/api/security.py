# storefront/api/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from storefront.utils.settings import SECRET_KEY

ALGO = "HS256"
SESSION_EXPIRE_DAYS = 365


def create_session_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=SESSION_EXPIRE_DAYS))
    return jwt.encode({"sub": user_id, "exp": expire}, SECRET_KEY, algorithm=ALGO)


def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGO])
    except jwt.PyJWTError:
        return None
