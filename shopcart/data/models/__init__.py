#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w Base.metadata

from shopcart.data.models.user import UserModel
from shopcart.data.models.product import ProductModel
from shopcart.data.models.cart import CartModel
from shopcart.data.models.cart_item import CartItemModel
from shopcart.data.models.order import OrderModel, OrderStatus
from shopcart.data.models.order_item import OrderItemModel

__all__ = [
    "UserModel",
    "ProductModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderStatus",
    "OrderItemModel",
]
