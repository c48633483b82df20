# shopcart/services/order_service.py
from decimal import Decimal
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from shopcart.data.models.order import OrderModel, OrderStatus
from shopcart.data.models.order_item import OrderItemModel
from shopcart.domain.errors import NotFoundError, EmptyCartError, ForbiddenError, InvalidStateError
from shopcart.repos.order_repo import OrderRepo
from shopcart.services.cart_service import CartService
from shopcart.services.catalog import CatalogReader, build_catalog
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Separacja od CartService, koszyk czytany i czyszczony przez CartService.
    """

    def __init__(self, db: Session, catalog: CatalogReader | None = None):
        self.repo = OrderRepo(db)
        self.catalog = catalog or build_catalog(db)
        self.cart_service = CartService(db, catalog=self.catalog)

    def create_order(self, user_id: int) -> Dict[str, Any]:
        """
        Use Case: Tworzenie zamówienia z koszyka.

        1. Koszyk musi istnieć (nie tworzymy go tutaj) i mieć pozycje
        2. Snapshot nazwy i ceny każdego produktu z katalogu
        3. Zapis zamówienia PENDING i jego pozycji
        4. Czyszczenie koszyka na końcu, wszystko w jednej transakcji
        """
        cart = self.cart_service.repo.find_cart_by_user(user_id)
        if not cart:
            raise NotFoundError("Koszyk nie istnieje")

        lines = self.cart_service.repo.find_lines(cart.id)
        if not lines:
            raise EmptyCartError("Koszyk jest pusty")

        try:
            snapshots = []
            for line in lines:
                product = self.catalog.find_product(line.product_id)
                if product is None:
                    raise NotFoundError(f"Produkt {line.product_id} nie istnieje")

                price = Decimal(product.price)
                snapshots.append(
                    OrderItemModel(
                        product_id=line.product_id,
                        product_name=product.name,
                        product_price=price,
                        quantity=line.quantity,
                        subtotal=price * line.quantity,
                    )
                )

            total = sum((s.subtotal for s in snapshots), Decimal("0.00"))

            order = self.repo.save(
                OrderModel(
                    user_id=user_id,
                    status=OrderStatus.PENDING.value,
                    total_amount=total,
                )
            )

            for s in snapshots:
                s.order_id = order.id
            self.repo.save_lines(snapshots)

            self.cart_service.clear_cart(user_id, commit=False)
            self.repo.commit()
        except Exception as e:
            logger.error(f"Failed to create order from cart {cart.id}: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Order {order.id} created from cart {cart.id}, total {total}")

        return self._order_view(order, snapshots)

    def list_orders(self, user_id: int) -> List[Dict[str, Any]]:
        """Zamówienia usera, najnowsze pierwsze."""
        return [self._order_view(o, o.items) for o in self.repo.find_by_user(user_id)]

    def get_order(self, user_id: int, order_id: int) -> Dict[str, Any]:
        order = self._owned_order(user_id, order_id)
        return self._order_view(order, self.repo.find_lines(order.id))

    def cancel_order(self, user_id: int, order_id: int) -> Dict[str, Any]:
        """Anulowanie dozwolone tylko ze statusu PENDING i tylko przez właściciela."""
        #blokada wiersza do commita, rownolegle anulowanie zobaczy juz CANCELLED
        try:
            order = self._owned_order(user_id, order_id, for_update=True)

            if order.status != OrderStatus.PENDING.value:
                raise InvalidStateError(
                    f"Tylko zamówienia PENDING mogą być anulowane (status: {order.status})"
                )

            order.status = OrderStatus.CANCELLED.value
            self.repo.commit()
        except Exception as e:
            logger.error(f"Failed to cancel order {order_id}: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Order {order.id} cancelled by user {user_id}")

        return self._order_view(order, self.repo.find_lines(order.id))

    def _owned_order(self, user_id: int, order_id: int, for_update: bool = False) -> OrderModel:
        order = self.repo.find_by_id(order_id, for_update=for_update)

        if not order:
            raise NotFoundError("Zamówienie nie istnieje")

        if order.user_id != user_id:
            logger.warning(f"User {user_id} tried to access order {order_id} of user {order.user_id}")
            raise ForbiddenError("Zamówienie nie należy do użytkownika")

        return order

    @staticmethod
    def _order_view(order: OrderModel, items: List[OrderItemModel]) -> Dict[str, Any]:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status,
            "total_amount": order.total_amount,
            "created_at": order.created_at,
            "items": [
                {
                    "id": i.id,
                    "product_id": i.product_id,
                    "product_name": i.product_name,
                    "product_price": i.product_price,
                    "quantity": i.quantity,
                    "subtotal": i.subtotal,
                }
                for i in items
            ],
        }
