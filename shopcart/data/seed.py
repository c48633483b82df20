# shopcart/data/seed.py
from decimal import Decimal

from shopcart.data.database import SessionLocal
from shopcart.data.models import ProductModel
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"name": "Keyboard", "price": Decimal("199.99"), "description": "Mechanical keyboard"},
    {"name": "Mouse", "price": Decimal("49.50"), "description": "Wireless mouse"},
    {"name": "Monitor", "price": Decimal("899.00"), "description": "27 inch IPS monitor"},
]


def seed(session_factory=SessionLocal):
    db = session_factory()
    try:
        # seed tylko gdy katalog pusty
        if db.query(ProductModel).first():
            return
        db.add_all(ProductModel(**p) for p in DEMO_PRODUCTS)
        db.commit()
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} demo products")
    finally:
        db.close()
