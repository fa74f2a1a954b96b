from storefront.data.models import ProductModel


def test_price_range_is_inclusive_in_minor_units(client, make_product):
    for price in (999, 1000, 3000, 5000, 5001):
        make_product(name=f"P{price}", price=price)

    body = client.get("/products", params={"min_price": 10, "max_price": 50}).json()

    assert sorted(p["price"] for p in body["products"]) == [1000, 3000, 5000]
    assert body["total"] == 3


def test_list_hides_inactive_and_filters(client, make_product):
    make_product(name="Barley Green", category="barley-powder", featured=True)
    make_product(name="Barley Gold", category="barley-powder")
    make_product(name="Green Tea", category="tea")
    make_product(name="Barley Old", active=False)

    names = lambda params: sorted(p["name"] for p in client.get("/products", params=params).json()["products"])

    assert names({}) == ["Barley Gold", "Barley Green", "Green Tea"]
    assert names({"search": "Barley"}) == ["Barley Gold", "Barley Green"]
    assert names({"category": "tea"}) == ["Green Tea"]
    assert names({"featured": True}) == ["Barley Green"]


def test_sort_is_global_across_pages(client, make_product):
    for price in (300, 100, 500, 200, 400):
        make_product(name=f"P{price}", price=price)

    first = client.get("/products", params={"sort": "price-asc", "limit": 2}).json()
    second = client.get("/products", params={"sort": "price-asc", "limit": 2, "offset": 2}).json()

    assert [p["price"] for p in first["products"]] == [100, 200]
    assert [p["price"] for p in second["products"]] == [300, 400]
    # total to liczba wszystkich dopasowan, nie rozmiar strony
    assert first["total"] == 5


def test_invalid_list_params(client):
    assert client.get("/products", params={"limit": 0}).status_code == 400
    assert client.get("/products", params={"sort": "random"}).status_code == 400


def test_get_product(client, make_product):
    product = make_product(name="Barley")

    assert client.get(f"/products/{product.id}").json()["name"] == "Barley"

    resp = client.get("/products/prod_missing")
    assert resp.status_code == 404
    assert resp.json() == {"code": "NOT_FOUND", "message": "Product not found"}


def test_create_requires_merchant_or_admin(client, users, auth):
    payload = {"name": "Barley", "price": 19.99, "stock": 5}

    assert client.post("/products", json=payload).status_code == 401

    resp = client.post("/products", json=payload, headers=auth(users["customer"]))
    assert resp.status_code == 403
    assert resp.json()["code"] == "FORBIDDEN"


def test_merchant_create_converts_price_and_sets_owner(client, session, users, auth):
    payload = {"name": "Barley", "price": 19.99, "original_price": 24.5, "stock": 5, "images": ["a.png"]}

    resp = client.post("/products", json=payload, headers=auth(users["merchant"]))

    assert resp.status_code == 201
    product = session.get(ProductModel, resp.json()["id"])
    assert product.price == 1999
    assert product.original_price == 2450
    assert product.merchant_id == "merchant-1"
    assert product.category == "barley-powder"
    assert product.active is True


def test_admin_create_has_no_owner(client, session, users, auth):
    resp = client.post("/products", json={"name": "Tea", "price": 5}, headers=auth(users["admin"]))

    product = session.get(ProductModel, resp.json()["id"])
    assert product.merchant_id is None
    assert product.price == 500


def test_duplicate_sku_conflicts(client, users, auth, make_product):
    make_product(sku="BAR-1")

    resp = client.post(
        "/products",
        json={"name": "Dup", "price": 1, "sku": "BAR-1"},
        headers=auth(users["admin"]),
    )

    assert resp.status_code == 409


def test_update_ownership_rules(client, session, users, auth, make_product):
    product = make_product(merchant_id="merchant-1", price=1000)
    url = f"/products/{product.id}"

    assert client.patch(url, json={"price": 12}, headers=auth(users["merchant2"])).status_code == 403
    assert client.patch(url, json={"price": 12}, headers=auth(users["customer"])).status_code == 403

    assert client.patch(url, json={"price": 12.5}, headers=auth(users["merchant"])).json() == {"success": True}
    session.expire_all()
    assert session.get(ProductModel, product.id).price == 1250

    assert client.patch(url, json={"stock": 3}, headers=auth(users["admin"])).status_code == 200
    assert client.patch("/products/prod_missing", json={"stock": 3}, headers=auth(users["admin"])).status_code == 404


def test_deactivate_is_soft(client, users, auth, make_product):
    product = make_product(name="Retired")

    client.patch(f"/products/{product.id}", json={"active": False}, headers=auth(users["admin"]))

    assert client.get("/products").json()["products"] == []
    assert client.get(f"/products/{product.id}").json()["active"] is False


def test_merchant_products(client, users, auth, make_product):
    make_product(name="Mine", merchant_id="merchant-1")
    make_product(name="Mine hidden", merchant_id="merchant-1", active=False)
    make_product(name="Theirs", merchant_id="merchant-2")

    mine = client.get("/merchant/products", headers=auth(users["merchant"])).json()
    assert sorted(p["name"] for p in mine) == ["Mine", "Mine hidden"]

    everything = client.get("/merchant/products", headers=auth(users["admin"])).json()
    assert len(everything) == 3

    assert client.get("/merchant/products", headers=auth(users["customer"])).status_code == 403
