# storefront/data/seed.py
from datetime import timedelta

from storefront.data.database import Database
from storefront.data.models import PromoCodeModel, ProductModel, UserModel
from storefront.data.models._common import utcnow
from storefront.domain.ids import new_id
from storefront.utils.settings import DATABASE_URL, OWNER_USER_ID
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"name": "Organic Barley Grass Powder 500g", "price": 2499, "stock": 120, "weight": "500g", "featured": True},
    {"name": "Barley Grass Powder 1kg", "price": 4299, "stock": 60, "weight": "1kg"},
    {"name": "Barley Tea Sampler", "price": 999, "stock": 200, "category": "tea"},
]


def seed(database: Database) -> bool:
    """Wypelnia pusta baze danymi demo. Zwraca False gdy baza juz ma produkty."""
    database.create_all()

    db = database.session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            return False

        owner_id = OWNER_USER_ID or "owner"
        db.add(UserModel(id=owner_id, name="Store Owner", role="admin"))

        for data in PRODUCTS:
            db.add(ProductModel(id=new_id("prod"), **data))

        db.add(
            PromoCodeModel(
                id=new_id("promo"),
                code="SAVE10",
                description="10% off your order",
                discount_type="percentage",
                discount_value=10,
                min_purchase=0,
                expires_at=utcnow() + timedelta(days=90),
            )
        )
        db.commit()
        logger.info(f"Seeded {len(PRODUCTS)} products, owner {owner_id} and promo SAVE10")
        return True
    finally:
        db.close()


if __name__ == "__main__":
    seed(Database(DATABASE_URL))
