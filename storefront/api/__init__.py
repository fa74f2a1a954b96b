# storefront/api/__init__.py
from storefront.api.routers import (
    auth,
    blog,
    cart,
    contact,
    health,
    merchant,
    notifications,
    orders,
    products,
    promo_codes,
    reviews,
    wishlist,
)

ROUTERS = [
    health.router,
    auth.router,
    products.router,
    reviews.router,
    cart.router,
    orders.router,
    promo_codes.router,
    blog.router,
    contact.router,
    wishlist.router,
    merchant.router,
    notifications.router,
]
