from storefront.data.models import ContactSubmissionModel, ProductModel, ReviewModel


def _post(**kwargs):
    data = {"title": "Why barley", "slug": "why-barley", "content": "Because.", "published": True}
    data.update(kwargs)
    return data


# ==================== REVIEWS ====================

def test_review_updates_product_rating(client, session, users, auth, make_product):
    product = make_product()

    for user, rating in (("customer", 5), ("other", 2), ("customer", 4)):
        resp = client.post(
            "/reviews",
            json={"product_id": product.id, "rating": rating, "title": "ok"},
            headers=auth(users[user]),
        )
        assert resp.status_code == 201

    session.expire_all()
    refreshed = session.get(ProductModel, product.id)
    assert refreshed.review_count == 3
    assert float(refreshed.rating) == 3.67

    listing = client.get("/reviews", params={"product_id": product.id}).json()
    assert listing["total"] == 3
    assert len(listing["reviews"]) == 3


def test_review_verified_after_purchase(client, session, users, auth, make_product):
    product = make_product()
    headers = auth(users["customer"])
    client.post(
        "/orders",
        json={
            "items": [{"product_id": product.id, "quantity": 1}],
            "shipping_address": {"city": "X"},
            "payment_method": "paypal",
        },
        headers=headers,
    )

    bought = client.post("/reviews", json={"product_id": product.id, "rating": 5}, headers=headers).json()["id"]
    stranger = client.post(
        "/reviews", json={"product_id": product.id, "rating": 5}, headers=auth(users["other"])
    ).json()["id"]

    assert session.get(ReviewModel, bought).verified is True
    assert session.get(ReviewModel, stranger).verified is False


def test_review_validation(client, users, auth, make_product):
    product = make_product()
    headers = auth(users["customer"])

    assert client.post("/reviews", json={"product_id": product.id, "rating": 6}, headers=headers).status_code == 400
    assert client.post("/reviews", json={"product_id": product.id, "rating": 0}, headers=headers).status_code == 400
    assert client.post("/reviews", json={"product_id": "prod_missing", "rating": 3}, headers=headers).status_code == 404
    assert client.post("/reviews", json={"product_id": product.id, "rating": 3}).status_code == 401


# ==================== BLOG ====================

def test_blog_create_is_admin_only(client, users, auth):
    assert client.post("/blog", json=_post(), headers=auth(users["merchant"])).status_code == 403
    assert client.post("/blog", json=_post(), headers=auth(users["admin"])).status_code == 201


def test_blog_lists_only_published(client, users, auth):
    headers = auth(users["admin"])
    client.post("/blog", json=_post(), headers=headers)
    client.post("/blog", json=_post(slug="draft", published=False), headers=headers)

    listing = client.get("/blog").json()
    assert listing["total"] == 1
    assert listing["posts"][0]["slug"] == "why-barley"
    assert listing["posts"][0]["author"] == "Ada"

    assert client.get("/blog/why-barley").json()["title"] == "Why barley"
    assert client.get("/blog/draft").status_code == 404


def test_blog_slug_conflict_and_format(client, users, auth):
    headers = auth(users["admin"])
    client.post("/blog", json=_post(), headers=headers)

    resp = client.post("/blog", json=_post(title="Again"), headers=headers)
    assert resp.status_code == 409
    assert resp.json()["code"] == "CONFLICT"

    assert client.post("/blog", json=_post(slug="Not A Slug"), headers=headers).status_code == 400


# ==================== CONTACT ====================

def _contact(**kwargs):
    data = {"name": "Eve", "email": "eve@example.com", "subject": "Hello", "message": "Question"}
    data.update(kwargs)
    return data


def test_contact_submit_is_public(client, session):
    resp = client.post("/contact", json=_contact())

    assert resp.status_code == 201
    submission = session.get(ContactSubmissionModel, resp.json()["id"])
    assert submission.status == "new"


def test_contact_rejects_bad_email(client):
    resp = client.post("/contact", json=_contact(email="not-an-email"))

    assert resp.status_code == 400
    assert resp.json()["code"] == "BAD_REQUEST"
    assert resp.json()["message"].startswith("email")


def test_contact_list_and_respond_admin_only(client, session, users, auth):
    submission_id = client.post("/contact", json=_contact()).json()["id"]

    assert client.get("/contact", headers=auth(users["customer"])).status_code == 403
    listing = client.get("/contact", headers=auth(users["admin"])).json()
    assert listing["total"] == 1

    url = f"/contact/{submission_id}/respond"
    assert client.post(url, json={"response": "Hi"}, headers=auth(users["customer"])).status_code == 403
    assert client.post(url, json={"response": "Hi"}, headers=auth(users["admin"])).json() == {"success": True}
    assert client.post("/contact/missing/respond", json={"response": "Hi"}, headers=auth(users["admin"])).status_code == 404

    session.expire_all()
    submission = session.get(ContactSubmissionModel, submission_id)
    assert submission.status == "responded"
    assert submission.responded_by == "admin-1"
    assert submission.responded_at is not None
