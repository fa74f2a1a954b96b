# storefront/repos/product_repo.py
from typing import Iterable

from sqlalchemy import select, update, func
from sqlalchemy.orm import Session

from storefront.data.database import soft_read
from storefront.data.models.product import ProductModel

_SORTS = {
    "newest": (ProductModel.created_at.desc(), ProductModel.id),
    "price-asc": (ProductModel.price.asc(), ProductModel.id),
    "price-desc": (ProductModel.price.desc(), ProductModel.id),
    "rating": (ProductModel.rating.desc(), ProductModel.review_count.desc(), ProductModel.id),
}


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _conditions(
        search: str | None = None,
        category: str | None = None,
        min_price: int | None = None,
        max_price: int | None = None,
        featured: bool | None = None,
        merchant_id: str | None = None,
        active_only: bool = True,
    ) -> list:
        conditions = []
        if active_only:
            conditions.append(ProductModel.active.is_(True))
        if search:
            conditions.append(ProductModel.name.like(f"%{search}%"))
        if category:
            conditions.append(ProductModel.category == category)
        # granice cen wlacznie
        if min_price is not None:
            conditions.append(ProductModel.price >= min_price)
        if max_price is not None:
            conditions.append(ProductModel.price <= max_price)
        if featured:
            conditions.append(ProductModel.featured.is_(True))
        if merchant_id is not None:
            conditions.append(ProductModel.merchant_id == merchant_id)
        return conditions

    @soft_read(list)
    def list_products(
        self,
        limit: int = 20,
        offset: int = 0,
        sort: str = "newest",
        **filters,
    ) -> list[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(*self._conditions(**filters))
            .order_by(*_SORTS[sort])
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    @soft_read(lambda: 0)
    def count_products(self, **filters) -> int:
        stmt = select(func.count()).select_from(ProductModel).where(*self._conditions(**filters))
        return self.db.execute(stmt).scalar_one()

    @soft_read(lambda: None)
    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_product_for_update(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def load_products(self, product_ids: Iterable[str]) -> dict[str, ProductModel]:
        ids = set(product_ids)
        if not ids:
            return {}
        rows = self.db.execute(
            select(ProductModel).where(ProductModel.id.in_(ids))
        ).scalars().all()
        return {p.id: p for p in rows}

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def decrement_stock(self, product_id: str, quantity: int) -> int:
        # warunkowy update: stock = stock - qty where stock >= qty
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def update_rating(self, product_id: str, rating: float, review_count: int) -> None:
        self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(rating=round(rating, 2), review_count=review_count)
            .execution_options(synchronize_session=False)
        )
