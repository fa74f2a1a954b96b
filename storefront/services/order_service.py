# storefront/services/order_service.py
from collections import Counter

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from storefront.domain.ids import new_id, new_order_number
from storefront.domain.money import to_minor
from storefront.domain.pricing import OrderTotals, compute_discount, compute_totals
from storefront.domain.schemas import OrderCreate
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.promo_code_repo import PromoCodeRepo
from storefront.services.access import is_admin
from storefront.services.notification_service import NotificationService
from storefront.services.promo_code_service import check_promo_code, USAGE_LIMIT_REACHED
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_NUMBER_ATTEMPTS = 5


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Skladanie zamowienia to jedna transakcja: naglowek + pozycje + promo + stock + czyszczenie koszyka.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)
        self.products = ProductRepo(db)
        self.promo_codes = PromoCodeRepo(db)
        self.cart = CartRepo(db)
        self.notifications = NotificationService(db)

    def create_order(self, user: UserModel, payload: OrderCreate) -> dict:
        """
        Use Case: Zlozenie zamowienia.

        1. Ceny z aktualnych produktow, nie od klienta
        2. Promo: walidacja + compare-and-increment uzycia
        3. Warunkowe zdjecie stocku
        4. Zamowienie + pozycje, czyszczenie koszyka, powiadomienie
        Blad w dowolnym kroku = rollback calosci.
        """
        with transaction(self.db):
            products = self.products.load_products(i.product_id for i in payload.items)

            lines = []
            for item in payload.items:
                product = products.get(item.product_id)
                if product is None or not product.active:
                    raise BadRequestError(f"Product {item.product_id} is not available")
                lines.append((product, item.quantity))

            subtotal = sum(product.price * quantity for product, quantity in lines)

            discount = 0
            promo_code = None
            if payload.promo_code:
                promo = self.promo_codes.get_by_code(payload.promo_code)
                error = check_promo_code(promo, subtotal)
                if error:
                    raise BadRequestError(error)

                discount = compute_discount(subtotal, promo.discount_type, promo.discount_value)
                if self.promo_codes.increment_usage(promo.id) == 0:
                    raise BadRequestError(USAGE_LIMIT_REACHED)
                promo_code = promo.code

            totals = compute_totals(subtotal, discount)
            self._log_client_mismatch(user.id, payload, totals)

            # laczymy pozycje tego samego produktu, zeby warunek stocku obejmowal sume
            wanted = Counter()
            for product, quantity in lines:
                wanted[product.id] += quantity
            for product_id, quantity in wanted.items():
                if self.products.decrement_stock(product_id, quantity) == 0:
                    raise BadRequestError(f"Insufficient stock for {products[product_id].name}")

            order_id = new_id("ord")
            order = OrderModel(
                id=order_id,
                user_id=user.id,
                order_number=self._allocate_order_number(),
                status="pending",
                subtotal=totals.subtotal,
                tax=totals.tax,
                shipping=totals.shipping,
                discount=totals.discount,
                total=totals.total,
                promo_code=promo_code,
                payment_method=payload.payment_method,
                shipping_address=payload.shipping_address,
                billing_address=payload.billing_address or payload.shipping_address,
                notes=payload.notes,
            )
            items = [
                OrderItemModel(
                    id=new_id("oi"),
                    order_id=order_id,
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    price=product.price,
                    subtotal=product.price * quantity,
                )
                for product, quantity in lines
            ]
            try:
                self.repo.create_order(order, items)
            except IntegrityError:
                # wyscig o ten sam numer zamowienia miedzy dwoma requestami
                raise ConflictError(f"Order number {order.order_number} already taken, please retry")

            self.cart.clear_cart(user.id)

            notification = self.notifications.record(
                user.id,
                "order_status",
                f"Order {order.order_number} placed",
                content=f"We received your order {order.order_number}.",
                action_url=f"/orders/{order_id}",
            )

        logger.info(
            f"Order {order.id} ({order.order_number}) created for user {user.id}, total {order.total}"
        )
        NotificationService.dispatch(notification)

        return {
            "order_id": order.id,
            "order_number": order.order_number,
            "total": order.total,
        }

    def _allocate_order_number(self) -> str:
        for _ in range(ORDER_NUMBER_ATTEMPTS):
            number = new_order_number()
            if not self.repo.order_number_taken(number):
                return number
            logger.warning(f"Order number {number} already taken, generating another")
        raise ConflictError("Could not allocate an order number, please retry")

    @staticmethod
    def _log_client_mismatch(user_id: str, payload: OrderCreate, totals: OrderTotals) -> None:
        client = {
            "subtotal": to_minor(payload.subtotal),
            "tax": to_minor(payload.tax),
            "shipping": to_minor(payload.shipping),
            "discount": to_minor(payload.discount),
        }
        server = {
            "subtotal": totals.subtotal,
            "tax": totals.tax,
            "shipping": totals.shipping,
            "discount": totals.discount,
        }
        diff = {k: (v, server[k]) for k, v in client.items() if v is not None and v != server[k]}
        if diff:
            logger.warning(f"Client totals differ from server totals for user {user_id}: {diff}")

    def list_orders(self, user_id: str, limit: int = 20, offset: int = 0) -> dict:
        return {
            "orders": self.repo.get_user_orders(user_id, limit, offset),
            "total": self.repo.count_user_orders(user_id),
        }

    def get_order(self, user: UserModel, order_id: str) -> OrderModel:
        order = self.repo.get_order(order_id, with_items=True)

        # cudze zamowienie wyglada jak nieistniejace
        if not order or (order.user_id != user.id and not is_admin(user)):
            raise NotFoundError("Order not found")

        return order

    def update_status(self, user: UserModel, order_id: str, status: str) -> None:
        """
        Status ustawiany bezposrednio, bez tabeli przejsc.
        Moze wlasciciel zamowienia albo admin.
        """
        with transaction(self.db):
            order = self.repo.get_order_for_update(order_id)
            if not order:
                raise NotFoundError("Order not found")

            if not is_admin(user) and order.user_id != user.id:
                raise ForbiddenError("You cannot update this order")

            previous = order.status
            self.repo.update_order_status(order, status)

            notification = self.notifications.record(
                order.user_id,
                "order_status",
                f"Order {order.order_number} is {status}",
                action_url=f"/orders/{order.id}",
            )

        logger.info(f"Order {order_id} status {previous} -> {status} by {user.id}")
        NotificationService.dispatch(notification)
