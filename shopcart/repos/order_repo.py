# shopcart/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shopcart.data.models.order import OrderModel
from shopcart.data.models.order_item import OrderItemModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def save(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def save_lines(self, lines: list[OrderItemModel]) -> list[OrderItemModel]:
        self.db.add_all(lines)
        self.db.flush()
        return lines

    def find_by_id(self, order_id: int, for_update: bool = False) -> OrderModel | None:
        if not for_update:
            return self.db.get(OrderModel, order_id)

        #SELECT ... FOR UPDATE, populate_existing nadpisuje status z identity map
        return self.db.execute(
            select(OrderModel)
            .where(OrderModel.id == order_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def find_by_user(self, user_id: int) -> list[OrderModel]:
        # najnowsze pierwsze, id rozstrzyga remis na created_at
        return list(
            self.db.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def find_lines(self, order_id: int) -> list[OrderItemModel]:
        return list(
            self.db.execute(
                select(OrderItemModel)
                .where(OrderItemModel.order_id == order_id)
                .order_by(OrderItemModel.id)
            ).scalars().all()
        )

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
