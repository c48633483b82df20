# shopcart/services/catalog.py
from decimal import Decimal
from typing import Protocol

from sqlalchemy.orm import Session

from shopcart.repos.product_repo import ProductRepo
from shopcart.services.product_client import ProductClient
from shopcart.utils.settings import PRODUCT_SERVICE_URL


class CatalogProduct(Protocol):
    id: int
    name: str
    price: Decimal


class CatalogReader(Protocol):
    """Czytnik katalogu uzywany przez koszyk i zamowienia, tylko odczyt."""

    def find_product(self, product_id: int) -> CatalogProduct | None: ...


def build_catalog(db: Session) -> CatalogReader:
    # zdalny product-service jesli skonfigurowany, inaczej tabela products
    if PRODUCT_SERVICE_URL:
        return ProductClient()
    return ProductRepo(db)
