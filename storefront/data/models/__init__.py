#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from storefront.data.models.user import UserModel
from storefront.data.models.product import ProductModel
from storefront.data.models.review import ReviewModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.data.models.promo_code import PromoCodeModel
from storefront.data.models.blog_post import BlogPostModel
from storefront.data.models.contact_submission import ContactSubmissionModel
from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.data.models.merchant_profile import MerchantProfileModel
from storefront.data.models.notification import NotificationModel

__all__ = [
    "UserModel",
    "ProductModel",
    "ReviewModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "PromoCodeModel",
    "BlogPostModel",
    "ContactSubmissionModel",
    "WishlistItemModel",
    "MerchantProfileModel",
    "NotificationModel",
]
