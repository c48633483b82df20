# shopcart/repos/cart_repo.py
from datetime import datetime, timezone

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from shopcart.data.models.cart import CartModel
from shopcart.data.models.cart_item import CartItemModel


class CartRepo:
    """
    Dostep do tabel carts / cart_items.
    Metody robia tylko flush, commit/rollback wola serwis raz na operacje.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def create_cart(self, user_id: int) -> CartModel:
        cart = CartModel(user_id=user_id)
        self.db.add(cart)
        self.db.flush()
        return cart

    def find_lines(self, cart_id: int) -> list[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.cart_id == cart_id)
                .order_by(CartItemModel.id)
            ).scalars().all()
        )

    def find_line(self, cart_id: int, product_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def save_line(self, line: CartItemModel) -> CartItemModel:
        self.db.add(line)
        self.db.flush()
        return line

    def delete_line(self, cart_id: int, product_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
        )
        return result.rowcount

    def delete_all_lines(self, cart_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.cart_id == cart_id)
        )
        return result.rowcount

    def touch(self, cart: CartModel) -> None:
        #bulk delete nie odpala onupdate, wiec updated_at ustawiamy recznie
        cart.updated_at = datetime.now(timezone.utc)
        self.db.flush()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
