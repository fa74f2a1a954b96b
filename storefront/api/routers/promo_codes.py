# storefront/api/routers/promo_codes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.data.models.user import UserModel
from storefront.domain.money import to_minor
from storefront.domain.schemas import IdOut, PromoCodeCreate, PromoValidateIn, PromoValidateOut
from storefront.services.promo_code_service import PromoCodeService

router = APIRouter(prefix="/promo-codes", tags=["promo-codes"])


@router.post("/validate", response_model=PromoValidateOut)
def validate(payload: PromoValidateIn, db: Session = Depends(get_db)):
    return PromoCodeService(db).validate(payload.code, to_minor(payload.purchase_amount))


@router.post("", response_model=IdOut, status_code=201)
def create_promo_code(
    payload: PromoCodeCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"id": PromoCodeService(db).create_promo_code(user, payload)}
