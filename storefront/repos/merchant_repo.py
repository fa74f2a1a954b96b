# storefront/repos/merchant_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.merchant_profile import MerchantProfileModel


class MerchantRepo:
    def __init__(self, db: Session):
        self.db = db

    @soft_read(lambda: None)
    def get_profile(self, user_id: str) -> MerchantProfileModel | None:
        return self.get_profile_for_update(user_id)

    def get_profile_for_update(self, user_id: str) -> MerchantProfileModel | None:
        return self.db.execute(
            select(MerchantProfileModel).where(MerchantProfileModel.user_id == user_id)
        ).scalar_one_or_none()

    def add_profile(self, profile: MerchantProfileModel) -> MerchantProfileModel:
        self.db.add(profile)
        self.db.flush()
        return profile
