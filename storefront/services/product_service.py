# storefront/services/product_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.product import ProductModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import NotFoundError, ForbiddenError, ConflictError
from storefront.domain.ids import new_id
from storefront.domain.money import to_minor
from storefront.domain.schemas import ProductCreate, ProductUpdate
from storefront.repos.product_repo import ProductRepo
from storefront.services.access import ensure_role, is_admin, ADMIN, MERCHANT
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_MONEY_FIELDS = ("price", "original_price")
_REQUIRED_FIELDS = ("name", "price", "stock", "featured", "active")


class ProductService:
    """Katalog: zapytania publiczne, zmiany tylko merchant (swoje) albo admin."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)

    # query
    def list_products(
        self,
        limit: int = 20,
        offset: int = 0,
        search: str | None = None,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        featured: bool | None = None,
        sort: str = "newest",
    ) -> dict:
        filters = {
            "search": search,
            "category": category,
            "min_price": to_minor(min_price),
            "max_price": to_minor(max_price),
            "featured": featured,
        }
        return {
            "products": self.repo.list_products(limit=limit, offset=offset, sort=sort, **filters),
            "total": self.repo.count_products(**filters),
        }

    def get_product(self, product_id: str) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def merchant_products(self, user: UserModel, limit: int = 100, offset: int = 0) -> list[ProductModel]:
        ensure_role(user, MERCHANT, ADMIN)
        merchant_id = None if is_admin(user) else user.id
        return self.repo.list_products(
            limit=limit,
            offset=offset,
            merchant_id=merchant_id,
            active_only=False,
        )

    # commands
    def create_product(self, user: UserModel, payload: ProductCreate) -> str:
        ensure_role(user, MERCHANT, ADMIN)

        data = payload.model_dump(exclude_none=True)
        for field in _MONEY_FIELDS:
            if field in data:
                data[field] = to_minor(data[field])

        product = ProductModel(
            id=new_id("prod"),
            merchant_id=user.id if user.role == MERCHANT else None,
            **data,
        )
        try:
            with transaction(self.db):
                self.repo.add_product(product)
        except IntegrityError:
            raise ConflictError("Product with this SKU already exists")

        logger.info(f"Product {product.id} created by {user.role} {user.id}")
        return product.id

    def update_product(self, user: UserModel, product_id: str, payload: ProductUpdate) -> None:
        ensure_role(user, MERCHANT, ADMIN)

        # null dozwolony tylko dla pol opcjonalnych w tabeli
        updates = {
            field: value
            for field, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or field not in _REQUIRED_FIELDS
        }
        for field in _MONEY_FIELDS:
            if updates.get(field) is not None:
                updates[field] = to_minor(updates[field])

        try:
            with transaction(self.db):
                product = self.repo.get_product_for_update(product_id)
                if not product:
                    raise NotFoundError("Product not found")

                if user.role == MERCHANT and product.merchant_id != user.id:
                    raise ForbiddenError("You can only manage your own products")

                for field, value in updates.items():
                    setattr(product, field, value)
        except IntegrityError:
            raise ConflictError("Product with this SKU already exists")

        logger.info(f"Product {product_id} updated: {sorted(updates)}")
