# storefront/repos/promo_code_repo.py
from sqlalchemy import select, update, or_
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.promo_code import PromoCodeModel


class PromoCodeRepo:
    def __init__(self, db: Session):
        self.db = db

    @soft_read(lambda: None)
    def get_active_code(self, code: str) -> PromoCodeModel | None:
        return self.db.execute(
            select(PromoCodeModel).where(
                PromoCodeModel.code == code,
                PromoCodeModel.active.is_(True),
            )
        ).scalar_one_or_none()

    def get_by_code(self, code: str) -> PromoCodeModel | None:
        return self.db.execute(
            select(PromoCodeModel).where(PromoCodeModel.code == code)
        ).scalar_one_or_none()

    def add_promo_code(self, promo: PromoCodeModel) -> PromoCodeModel:
        self.db.add(promo)
        self.db.flush()
        return promo

    def increment_usage(self, promo_id: str) -> int:
        # compare-and-increment, 0 rows = limit wyczerpany w miedzyczasie
        result = self.db.execute(
            update(PromoCodeModel)
            .where(
                PromoCodeModel.id == promo_id,
                or_(
                    PromoCodeModel.max_uses.is_(None),
                    PromoCodeModel.current_uses < PromoCodeModel.max_uses,
                ),
            )
            .values(current_uses=PromoCodeModel.current_uses + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
