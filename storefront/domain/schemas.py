# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr, model_validator
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime

Role = Literal["user", "merchant", "admin"]
OrderStatus = Literal[
    "pending",
    "confirmed",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
    "refunded",
]
PaymentMethod = Literal["credit_card", "paypal", "apple_pay", "bank_transfer"]
DiscountType = Literal["percentage", "fixed"]
ProductSort = Literal["newest", "price-asc", "price-desc", "rating"]


class IdOut(BaseModel):
    id: str


class SuccessOut(BaseModel):
    success: bool = True


# ==================== USERS ====================

class UserOut(BaseModel):
    """Zalogowany uzytkownik (auth.me)."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: Role
    phone: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime
    last_signed_in: datetime

    model_config = ConfigDict(from_attributes=True)


class UserUpsert(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Optional[Role] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None
    last_signed_in: Optional[datetime] = None


# ==================== PRODUCTS ====================

class ProductCreate(BaseModel):
    """Ceny podawane w major units (dolary), zapisywane x100."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    short_description: Optional[str] = Field(None, max_length=500)
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = None
    images: Optional[List[str]] = None
    nutrition_info: Optional[Dict[str, Any]] = None
    ingredients: Optional[str] = None
    weight: Optional[str] = Field(None, max_length=50)
    stock: int = Field(0, ge=0)
    featured: bool = False


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    short_description: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    sku: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = None
    images: Optional[List[str]] = None
    nutrition_info: Optional[Dict[str, Any]] = None
    ingredients: Optional[str] = None
    weight: Optional[str] = Field(None, max_length=50)
    stock: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None
    active: Optional[bool] = None


class ProductOut(BaseModel):
    """Produkt, ceny w centach."""

    id: str
    name: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    price: int
    original_price: Optional[int] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None
    nutrition_info: Optional[Dict[str, Any]] = None
    ingredients: Optional[str] = None
    weight: Optional[str] = None
    stock: int
    rating: float
    review_count: int
    featured: bool
    active: bool
    merchant_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductListOut(BaseModel):
    products: List[ProductOut]
    total: int


# ==================== REVIEWS ====================

class ReviewCreate(BaseModel):
    product_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None


class ReviewOut(BaseModel):
    id: str
    product_id: str
    user_id: str
    rating: int
    title: Optional[str] = None
    content: Optional[str] = None
    verified: bool
    helpful: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewListOut(BaseModel):
    reviews: List[ReviewOut]
    total: int


# ==================== CART ====================

class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1, description="Ilosc produktu (musi byc >= 1)")


class CartItemUpdate(BaseModel):
    """quantity = 0 usuwa pozycje."""

    quantity: int = Field(..., ge=0)


class CartItemOut(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    added_at: datetime
    product: Optional[ProductOut] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== ORDERS ====================

class OrderItemIn(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    # cena od klienta jest ignorowana, liczymy z aktualnych cen produktow
    price: Optional[float] = None


class OrderCreate(BaseModel):
    """Schema dla skladania zamowienia."""

    items: List[OrderItemIn] = Field(..., min_length=1)
    shipping_address: Dict[str, Any]
    billing_address: Optional[Dict[str, Any]] = None
    payment_method: PaymentMethod
    promo_code: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    shipping: Optional[float] = None
    discount: Optional[float] = None


class OrderCreated(BaseModel):
    order_id: str
    order_number: str
    total: int


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemOut(BaseModel):
    id: str
    product_id: str
    product_name: str
    quantity: int
    price: int
    subtotal: int

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamowienia (response), kwoty w centach."""

    id: str
    user_id: str
    order_number: str
    status: OrderStatus
    subtotal: int
    tax: int
    shipping: int
    discount: int
    total: int
    promo_code: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    payment_status: str
    shipping_address: Dict[str, Any]
    billing_address: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    tracking_number: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderDetailOut(OrderOut):
    items: List[OrderItemOut]


class OrderListOut(BaseModel):
    orders: List[OrderOut]
    total: int


# ==================== PROMO CODES ====================

class PromoValidateIn(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    purchase_amount: float = Field(..., ge=0)


class PromoCodeOut(BaseModel):
    id: str
    code: str
    description: Optional[str] = None
    discount_type: DiscountType
    discount_value: int
    min_purchase: Optional[int] = None
    max_uses: Optional[int] = None
    current_uses: int
    active: bool
    expires_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PromoValidateOut(BaseModel):
    valid: bool
    promo_code: Optional[PromoCodeOut] = None
    error: Optional[str] = None


class PromoCodeCreate(BaseModel):
    """Wartosc 'fixed' i minimum zakupu w major units, 'percentage' w procentach."""

    code: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = None
    discount_type: DiscountType
    discount_value: float = Field(..., gt=0)
    min_purchase: Optional[float] = Field(None, ge=0)
    max_uses: Optional[int] = Field(None, ge=0)
    expires_at: Optional[datetime] = None
    active: bool = True

    @model_validator(mode="after")
    def check_percentage(self):
        if self.discount_type == "percentage":
            if self.discount_value > 100:
                raise ValueError("Percentage discount cannot exceed 100")
            if self.discount_value != int(self.discount_value):
                raise ValueError("Percentage discount must be a whole number")
        return self


# ==================== BLOG ====================

class BlogPostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: Optional[str] = Field(None, max_length=500)
    content: str
    image: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    tags: Optional[List[str]] = None
    published: bool = False


class BlogPostOut(BaseModel):
    id: str
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    author: Optional[str] = None
    published: bool
    view_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BlogListOut(BaseModel):
    posts: List[BlogPostOut]
    total: int


# ==================== CONTACT ====================

class ContactSubmit(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class ContactRespond(BaseModel):
    response: str = Field(..., min_length=1)


class ContactSubmissionOut(BaseModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    status: str
    response: Optional[str] = None
    responded_by: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ContactListOut(BaseModel):
    submissions: List[ContactSubmissionOut]
    total: int


# ==================== WISHLIST ====================

class WishlistAdd(BaseModel):
    product_id: str = Field(..., min_length=1)


class WishlistItemOut(BaseModel):
    id: str
    user_id: str
    product_id: str
    added_at: datetime
    product: Optional[ProductOut] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== MERCHANT ====================

class MerchantProfileCreate(BaseModel):
    store_name: str = Field(..., min_length=1, max_length=255)
    store_description: Optional[str] = None
    logo: Optional[str] = None
    banner: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[Dict[str, Any]] = None


class MerchantProfileUpdate(BaseModel):
    store_name: Optional[str] = Field(None, min_length=1, max_length=255)
    store_description: Optional[str] = None
    logo: Optional[str] = None
    banner: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[Dict[str, Any]] = None


class MerchantProfileOut(BaseModel):
    id: str
    user_id: str
    store_name: str
    store_description: Optional[str] = None
    logo: Optional[str] = None
    banner: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Dict[str, Any]] = None
    verified: bool
    rating: float
    total_sales: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ==================== NOTIFICATIONS ====================

class NotificationOut(BaseModel):
    id: str
    user_id: str
    type: str
    title: str
    content: Optional[str] = None
    read: bool
    action_url: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationListOut(BaseModel):
    notifications: List[NotificationOut]
    total: int


class HealthOut(BaseModel):
    status: str
    database: bool
