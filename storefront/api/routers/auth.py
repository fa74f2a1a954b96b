# storefront/api/routers/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, Response

from storefront.api.deps import get_optional_user
from storefront.data.models.user import UserModel
from storefront.domain.schemas import UserOut, SuccessOut
from storefront.utils.settings import SESSION_COOKIE_NAME

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=Optional[UserOut])
def me(user: Optional[UserModel] = Depends(get_optional_user)):
    return user


@router.post("/logout", response_model=SuccessOut)
def logout(response: Response):
    # sesje wydaje zewnetrzny login, tu tylko kasujemy cookie
    response.delete_cookie(SESSION_COOKIE_NAME, path="/", httponly=True, samesite="lax")
    return {"success": True}
