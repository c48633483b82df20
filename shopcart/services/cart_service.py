from decimal import Decimal
from typing import Dict, Any, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopcart.data.models.cart import CartModel
from shopcart.data.models.cart_item import CartItemModel
from shopcart.domain.errors import NotFoundError
from shopcart.repos.cart_repo import CartRepo
from shopcart.services.catalog import CatalogReader, build_catalog
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka: jeden koszyk na usera, tworzony leniwie.
    commands (add, remove, clear) commituja raz na koniec operacji
    query (get_cart, get_total) moga tylko utworzyc pusty koszyk
    """

    def __init__(self, db: Session, catalog: CatalogReader | None = None):
        self.repo = CartRepo(db)
        self.catalog = catalog or build_catalog(db)

    def get_or_create_cart(self, user_id: int) -> CartModel:
        """Zwraca koszyk usera, tworzy pusty jesli go nie ma. Nie commituje."""
        cart = self.repo.find_cart_by_user(user_id)
        if cart:
            return cart

        try:
            cart = self.repo.create_cart(user_id)
        except IntegrityError:
            #rownolegly request utworzyl koszyk pierwszy (unique na user_id)
            self.repo.rollback()
            cart = self.repo.find_cart_by_user(user_id)
            if cart is None:
                raise
            return cart

        logger.info(f"Created cart {cart.id} for user {user_id}")
        return cart

    #query
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        cart = self.get_or_create_cart(user_id)
        view = self._cart_view(cart, self.repo.find_lines(cart.id))
        self.repo.commit()
        return view

    def get_total(self, user_id: int) -> Decimal:
        cart = self.get_or_create_cart(user_id)
        items = self._line_views(self.repo.find_lines(cart.id))
        self.repo.commit()
        return sum((i["subtotal"] for i in items), Decimal("0.00"))

    #commands
    def add_item(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        if quantity < 1:
            raise ValueError("Ilosc musi byc wieksza niz 0")

        product = self.catalog.find_product(product_id)
        if product is None:
            raise NotFoundError(f"Produkt {product_id} nie istnieje")

        try:
            try:
                cart = self._merge_line(user_id, product_id, quantity)
            except IntegrityError:
                #rownolegly request dodal ten sam produkt (u_cart_product), zwiekszamy jego pozycje
                logger.warning(f"Concurrent add of product {product_id} for user {user_id}, retrying as increment")
                self.repo.rollback()
                cart = self._merge_line(user_id, product_id, quantity)

            self.repo.touch(cart)
            view = self._cart_view(cart, self.repo.find_lines(cart.id))
            self.repo.commit()
        except Exception as e:
            logger.error(f"Failed to add product {product_id} for user {user_id}: {e}")
            self.repo.rollback()
            raise

        return view

    def remove_item(self, user_id: int, product_id: int) -> Dict[str, Any]:
        try:
            cart = self.get_or_create_cart(user_id)
            removed = self.repo.delete_line(cart.id, product_id)

            #brak pozycji to nie blad
            if removed:
                self.repo.touch(cart)
                logger.info(f"Removed product {product_id} from cart {cart.id}")

            view = self._cart_view(cart, self.repo.find_lines(cart.id))
            self.repo.commit()
        except Exception as e:
            logger.error(f"Failed to remove product {product_id} for user {user_id}: {e}")
            self.repo.rollback()
            raise

        return view

    def clear_cart(self, user_id: int, commit: bool = True) -> None:
        """
        Usuwa wszystkie pozycje koszyka.
        commit=False gdy czyszczenie jest czescia wiekszej transakcji (zamowienie).
        """
        cart = self.get_or_create_cart(user_id)
        removed = self.repo.delete_all_lines(cart.id)
        self.repo.touch(cart)

        if commit:
            self.repo.commit()

        logger.info(f"Cleared cart {cart.id} ({removed} lines)")

    def _merge_line(self, user_id: int, product_id: int, quantity: int) -> CartModel:
        """Dodaje ilosc do istniejacej pozycji albo tworzy nowa. Tylko flush."""
        cart = self.get_or_create_cart(user_id)
        line = self.repo.find_line(cart.id, product_id)

        if line:
            logger.info(
                f"Product {product_id} already in cart {cart.id}, "
                f"quantity {line.quantity} -> {line.quantity + quantity}"
            )
            line.quantity += quantity
            self.repo.save_line(line)
        else:
            logger.info(f"Adding product {product_id} x{quantity} to cart {cart.id}")
            self.repo.save_line(
                CartItemModel(
                    cart_id=cart.id,
                    product_id=product_id,
                    quantity=quantity,
                )
            )
        return cart

    def _line_views(self, lines: List[CartItemModel]) -> List[Dict[str, Any]]:
        items = []
        for line in lines:
            product = self.catalog.find_product(line.product_id)
            if product is None:
                raise NotFoundError(f"Produkt {line.product_id} nie istnieje")

            price = Decimal(product.price)
            items.append(
                {
                    "id": line.id,
                    "product_id": line.product_id,
                    "product_name": product.name,
                    "product_price": price,
                    "quantity": line.quantity,
                    "subtotal": price * line.quantity,
                }
            )
        return items

    def _cart_view(self, cart: CartModel, lines: List[CartItemModel]) -> Dict[str, Any]:
        items = self._line_views(lines)
        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "items": items,
            "total": sum((i["subtotal"] for i in items), Decimal("0.00")),
            "updated_at": cart.updated_at,
        }
