# storefront/services/merchant_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.merchant_profile import MerchantProfileModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import ConflictError, NotFoundError
from storefront.domain.ids import new_id
from storefront.domain.schemas import MerchantProfileCreate, MerchantProfileUpdate
from storefront.repos.merchant_repo import MerchantRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class MerchantService:
    """Profil sklepu, jeden na uzytkownika."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MerchantRepo(db)

    def get_profile(self, user: UserModel) -> MerchantProfileModel | None:
        return self.repo.get_profile(user.id)

    def create_profile(self, user: UserModel, payload: MerchantProfileCreate) -> str:
        profile = MerchantProfileModel(
            id=new_id("merchant"),
            user_id=user.id,
            **payload.model_dump(),
        )
        try:
            with transaction(self.db):
                if self.repo.get_profile_for_update(user.id):
                    raise ConflictError("Merchant profile already exists")
                self.repo.add_profile(profile)
        except IntegrityError:
            raise ConflictError("Merchant profile already exists")

        logger.info(f"Merchant profile {profile.id} created for {user.id}")
        return profile.id

    def update_profile(self, user: UserModel, payload: MerchantProfileUpdate) -> None:
        updates = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or field != "store_name"
        }
        with transaction(self.db):
            profile = self.repo.get_profile_for_update(user.id)
            if not profile:
                raise NotFoundError("Merchant profile not found")

            for field, value in updates.items():
                setattr(profile, field, value)
