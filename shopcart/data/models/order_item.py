from sqlalchemy import Column, Integer, ForeignKey, String, Numeric
from sqlalchemy.orm import relationship

from shopcart.data.database import Base


class OrderItemModel(Base):
    """Snapshot pozycji koszyka z chwili zamowienia, bez FK do products."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    product_id = Column(Integer, nullable=False)
    product_name = Column(String(255), nullable=False)
    product_price = Column(Numeric(10, 2), nullable=False)

    quantity = Column(Integer, nullable=False)
    subtotal = Column(Numeric(10, 2), nullable=False)  # product_price * quantity

    order = relationship("OrderModel", back_populates="items")
