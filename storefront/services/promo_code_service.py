# storefront/services/promo_code_service.py
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.promo_code import PromoCodeModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import ConflictError
from storefront.domain.ids import new_id
from storefront.domain.money import to_minor, format_major
from storefront.domain.schemas import PromoCodeCreate
from storefront.repos.promo_code_repo import PromoCodeRepo
from storefront.services.access import ensure_role, ADMIN
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CODE = "Invalid promo code"
EXPIRED = "Promo code has expired"
USAGE_LIMIT_REACHED = "Promo code usage limit reached"


def _as_utc(value: datetime) -> datetime:
    # sqlite zwraca naive datetime
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def check_promo_code(
    promo: PromoCodeModel | None,
    purchase_amount: int,
    now: datetime | None = None,
) -> str | None:
    """
    Zwraca komunikat pierwszego niespelnionego warunku albo None.
    Kolejnosc: istnieje i aktywny -> wygasl -> limit uzyc -> minimum zakupu.
    """
    now = now or datetime.now(timezone.utc)

    if promo is None or not promo.active:
        return INVALID_CODE

    if promo.expires_at is not None and now > _as_utc(promo.expires_at):
        return EXPIRED

    if promo.max_uses is not None and (promo.current_uses or 0) >= promo.max_uses:
        return USAGE_LIMIT_REACHED

    if promo.min_purchase and purchase_amount < promo.min_purchase:
        return f"Minimum purchase of ${format_major(promo.min_purchase)} is required"

    return None


class PromoCodeService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PromoCodeRepo(db)

    def validate(self, code: str, purchase_amount: int, now: datetime | None = None) -> dict:
        """Tylko sprawdzenie, nigdy nie zmienia current_uses."""
        promo = self.repo.get_active_code(code)
        error = check_promo_code(promo, purchase_amount, now)
        if error:
            logger.info(f"Promo code {code!r} rejected: {error}")
            return {"valid": False, "error": error}
        return {"valid": True, "promo_code": promo}

    def create_promo_code(self, user: UserModel, payload: PromoCodeCreate) -> str:
        ensure_role(user, ADMIN)

        value = payload.discount_value
        promo = PromoCodeModel(
            id=new_id("promo"),
            code=payload.code,
            description=payload.description,
            discount_type=payload.discount_type,
            # procent zostaje procentem, kwota stala -> centy
            discount_value=int(value) if payload.discount_type == "percentage" else to_minor(value),
            min_purchase=to_minor(payload.min_purchase) or 0,
            max_uses=payload.max_uses,
            current_uses=0,
            active=payload.active,
            expires_at=payload.expires_at,
        )
        try:
            with transaction(self.db):
                self.repo.add_promo_code(promo)
        except IntegrityError:
            raise ConflictError(f"Promo code {payload.code} already exists")

        logger.info(f"Promo code {promo.code} created")
        return promo.id
