# shopcart/services/catalog_service.py
from typing import List

from sqlalchemy.orm import Session

from shopcart.data.models.product import ProductModel
from shopcart.domain.errors import NotFoundError
from shopcart.domain.schemas import ProductIn, ProductOut
from shopcart.repos.product_repo import ProductRepo
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Zarzadzanie produktami. Zmiany cen nie dotykaja zlozonych zamowien."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_products()]

    def get_product(self, product_id: int) -> ProductOut:
        return ProductOut.model_validate(self._require(product_id))

    def create_product(self, payload: ProductIn) -> ProductOut:
        product = self.repo.create_product(ProductModel(**payload.model_dump()))
        logger.info(f"Created product {product.id} '{product.name}' price {product.price}")
        return ProductOut.model_validate(product)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        product = self._require(product_id)
        #PUT bez description zostawia dotychczasowy opis
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(product, field, value)
        product = self.repo.update_product(product)
        logger.info(f"Updated product {product.id}, price {product.price}")
        return ProductOut.model_validate(product)

    def delete_product(self, product_id: int) -> None:
        self.repo.delete_product(self._require(product_id))
        logger.info(f"Deleted product {product_id}")

    def _require(self, product_id: int) -> ProductModel:
        product = self.repo.find_product(product_id)
        if not product:
            raise NotFoundError(f"Produkt {product_id} nie istnieje")
        return product
