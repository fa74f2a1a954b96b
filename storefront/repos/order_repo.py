# storefront/repos/order_repo.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from storefront.data.database import soft_read
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel, items: list[OrderItemModel]) -> OrderModel:
        order.items = items
        self.db.add(order)
        self.db.flush()
        return order

    @soft_read(lambda: None)
    def get_order(self, order_id: str, with_items: bool = False) -> OrderModel | None:
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        if with_items:
            stmt = stmt.options(selectinload(OrderModel.items))
        return self.db.execute(stmt).scalar_one_or_none()

    def order_number_taken(self, order_number: str) -> bool:
        stmt = select(OrderModel.id).where(OrderModel.order_number == order_number).limit(1)
        return self.db.execute(stmt).first() is not None

    def get_order_for_update(self, order_id: str) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    @soft_read(list)
    def get_user_orders(self, user_id: str, limit: int = 20, offset: int = 0) -> list[OrderModel]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id)
            .limit(limit)
            .offset(offset)
        )
        return list(self.db.execute(stmt).scalars().all())

    @soft_read(lambda: 0)
    def count_user_orders(self, user_id: str) -> int:
        return self.db.execute(
            select(func.count()).select_from(OrderModel).where(OrderModel.user_id == user_id)
        ).scalar_one()

    def user_bought_product(self, user_id: str, product_id: str) -> bool:
        stmt = (
            select(OrderItemModel.id)
            .join(OrderModel, OrderModel.id == OrderItemModel.order_id)
            .where(
                OrderModel.user_id == user_id,
                OrderItemModel.product_id == product_id,
            )
            .limit(1)
        )
        return self.db.execute(stmt).first() is not None

    def update_order_status(self, order: OrderModel, status: str) -> OrderModel:
        order.status = status
        self.db.flush()
        return order
