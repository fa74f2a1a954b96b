from sqlalchemy import select

from storefront.data.models import (
    CartItemModel,
    NotificationModel,
    OrderModel,
    ProductModel,
    PromoCodeModel,
)

ADDRESS = {"street": "1 Main St", "city": "Springfield", "zip": "12345"}


def _order_payload(*lines, **extra):
    payload = {
        "items": [{"product_id": pid, "quantity": qty} for pid, qty in lines],
        "shipping_address": ADDRESS,
        "payment_method": "credit_card",
    }
    payload.update(extra)
    return payload


def _fill_cart(client, headers, product_id, quantity=1):
    client.post("/cart/items", json={"product_id": product_id, "quantity": quantity}, headers=headers)


def test_place_order_computes_totals_and_clears_cart(client, session, users, auth, make_product):
    product = make_product(name="Barley 500g", price=2500, stock=10)
    headers = auth(users["customer"])
    _fill_cart(client, headers, product.id, 2)

    resp = client.post("/orders", json=_order_payload((product.id, 2)), headers=headers)

    assert resp.status_code == 201
    body = resp.json()
    assert body["order_number"].startswith("ORD-")

    session.expire_all()
    order = session.get(OrderModel, body["order_id"])
    assert (order.subtotal, order.tax, order.shipping, order.discount) == (5000, 500, 500, 0)
    assert order.total == order.subtotal + order.tax + order.shipping - order.discount == body["total"]
    assert order.status == "pending"
    assert order.billing_address == ADDRESS

    assert [(i.product_name, i.price, i.quantity, i.subtotal) for i in order.items] == [
        ("Barley 500g", 2500, 2, 5000)
    ]
    assert session.execute(
        select(CartItemModel).where(CartItemModel.user_id == "user-1")
    ).scalars().all() == []
    assert session.get(ProductModel, product.id).stock == 8


def test_client_supplied_prices_are_ignored(client, session, users, auth, make_product):
    product = make_product(price=2500)
    payload = _order_payload((product.id, 1), subtotal=0.01, tax=0, shipping=0, discount=999)
    payload["items"][0]["price"] = 0.01

    body = client.post("/orders", json=payload, headers=auth(users["customer"])).json()

    order = session.get(OrderModel, body["order_id"])
    assert order.subtotal == 2500
    assert order.discount == 0
    assert order.total == 2500 + 250 + 500


def test_save10_on_100_dollars(client, session, users, auth, make_product, make_promo):
    product = make_product(price=5000, stock=5)
    promo = make_promo(code="SAVE10")

    body = client.post(
        "/orders",
        json=_order_payload((product.id, 2), promo_code="SAVE10"),
        headers=auth(users["customer"]),
    ).json()

    session.expire_all()
    order = session.get(OrderModel, body["order_id"])
    assert order.subtotal == 10000
    assert order.discount == 1000
    assert order.shipping == 0
    assert order.total == 10000 + 1000 + 0 - 1000
    assert order.promo_code == "SAVE10"
    assert session.get(PromoCodeModel, promo.id).current_uses == 1


def test_last_use_of_limited_code(client, session, users, auth, make_product, make_promo):
    product = make_product(stock=5)
    promo = make_promo(code="ONE", max_uses=1)
    payload = _order_payload((product.id, 1), promo_code="ONE")

    assert client.post("/orders", json=payload, headers=auth(users["customer"])).status_code == 201

    resp = client.post("/orders", json=payload, headers=auth(users["other"]))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Promo code usage limit reached"

    session.expire_all()
    assert session.get(PromoCodeModel, promo.id).current_uses == 1


def test_invalid_promo_rejects_order(client, users, auth, make_product):
    product = make_product()

    resp = client.post(
        "/orders",
        json=_order_payload((product.id, 1), promo_code="NOPE"),
        headers=auth(users["customer"]),
    )

    assert resp.status_code == 400
    assert resp.json() == {"code": "BAD_REQUEST", "message": "Invalid promo code"}


def test_insufficient_stock_rolls_back_everything(client, session, users, auth, make_product, make_promo):
    plenty = make_product(name="Plenty", stock=100)
    scarce = make_product(name="Scarce", stock=1)
    promo = make_promo(code="SAVE10")
    headers = auth(users["customer"])
    _fill_cart(client, headers, plenty.id)

    resp = client.post(
        "/orders",
        json=_order_payload((plenty.id, 1), (scarce.id, 2), promo_code="SAVE10"),
        headers=headers,
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Insufficient stock for Scarce"

    session.expire_all()
    assert session.execute(select(OrderModel)).scalars().all() == []
    assert session.get(ProductModel, plenty.id).stock == 100
    assert session.get(PromoCodeModel, promo.id).current_uses == 0
    assert len(session.execute(select(CartItemModel)).scalars().all()) == 1


def test_inactive_product_cannot_be_ordered(client, users, auth, make_product):
    product = make_product(active=False)

    resp = client.post("/orders", json=_order_payload((product.id, 1)), headers=auth(users["customer"]))

    assert resp.status_code == 400


def test_empty_order_is_rejected(client, users, auth):
    resp = client.post("/orders", json=_order_payload(), headers=auth(users["customer"]))
    assert resp.status_code == 400
    assert resp.json()["code"] == "BAD_REQUEST"


def test_order_placement_records_notification(client, session, users, auth, make_product):
    product = make_product()
    body = client.post("/orders", json=_order_payload((product.id, 1)), headers=auth(users["customer"])).json()

    notifications = session.execute(
        select(NotificationModel).where(NotificationModel.user_id == "user-1")
    ).scalars().all()

    assert len(notifications) == 1
    assert notifications[0].type == "order_status"
    assert notifications[0].action_url == f"/orders/{body['order_id']}"


def test_get_and_list_orders(client, users, auth, make_product):
    product = make_product()
    headers = auth(users["customer"])
    order_id = client.post("/orders", json=_order_payload((product.id, 3)), headers=headers).json()["order_id"]

    listing = client.get("/orders", headers=headers).json()
    assert listing["total"] == 1
    assert listing["orders"][0]["id"] == order_id

    detail = client.get(f"/orders/{order_id}", headers=headers).json()
    assert detail["items"][0]["quantity"] == 3

    assert client.get(f"/orders/{order_id}", headers=auth(users["other"])).status_code == 404
    assert client.get(f"/orders/{order_id}", headers=auth(users["admin"])).status_code == 200
    assert client.get("/orders", headers=auth(users["other"])).json() == {"orders": [], "total": 0}


def test_update_status_authorization(client, session, users, auth, make_product):
    product = make_product()
    order_id = client.post(
        "/orders", json=_order_payload((product.id, 1)), headers=auth(users["customer"])
    ).json()["order_id"]

    resp = client.patch(f"/orders/{order_id}/status", json={"status": "shipped"}, headers=auth(users["other"]))
    assert resp.status_code == 403
    assert resp.json()["code"] == "FORBIDDEN"

    # merchant nie jest ani wlascicielem, ani adminem
    resp = client.patch(f"/orders/{order_id}/status", json={"status": "shipped"}, headers=auth(users["merchant"]))
    assert resp.status_code == 403

    resp = client.patch(f"/orders/{order_id}/status", json={"status": "shipped"}, headers=auth(users["admin"]))
    assert resp.json() == {"success": True}

    # bez tabeli przejsc: wlasciciel moze ustawic dowolny status
    resp = client.patch(f"/orders/{order_id}/status", json={"status": "pending"}, headers=auth(users["customer"]))
    assert resp.status_code == 200

    session.expire_all()
    assert session.get(OrderModel, order_id).status == "pending"


def test_update_status_validation_and_missing_order(client, users, auth):
    headers = auth(users["admin"])

    resp = client.patch("/orders/ord_missing/status", json={"status": "shipped"}, headers=headers)
    assert resp.status_code == 404

    resp = client.patch("/orders/ord_missing/status", json={"status": "teleported"}, headers=headers)
    assert resp.status_code == 400


def test_taken_order_number_is_regenerated(client, users, auth, make_product, monkeypatch):
    product = make_product(stock=10)
    headers = auth(users["customer"])
    numbers = iter(["ORD-1-AAAA", "ORD-1-AAAA", "ORD-1-BBBB"])
    monkeypatch.setattr("storefront.services.order_service.new_order_number", lambda: next(numbers))

    first = client.post("/orders", json=_order_payload((product.id, 1)), headers=headers).json()
    second = client.post("/orders", json=_order_payload((product.id, 1)), headers=headers).json()

    assert first["order_number"] == "ORD-1-AAAA"
    assert second["order_number"] == "ORD-1-BBBB"


def test_order_number_exhaustion_is_a_conflict(client, session, users, auth, make_product, monkeypatch):
    product = make_product(stock=10)
    headers = auth(users["customer"])
    monkeypatch.setattr("storefront.services.order_service.new_order_number", lambda: "ORD-1-AAAA")
    client.post("/orders", json=_order_payload((product.id, 1)), headers=headers)

    resp = client.post("/orders", json=_order_payload((product.id, 1)), headers=headers)

    assert resp.status_code == 409
    assert resp.json()["code"] == "CONFLICT"
    session.expire_all()
    assert session.get(ProductModel, product.id).stock == 9
    assert len(session.scalars(select(OrderModel)).all()) == 1
