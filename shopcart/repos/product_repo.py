# shopcart/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from shopcart.data.models.product import ProductModel


class ProductRepo:
    """Katalog produktow w bazie. find_product to interfejs czytnika katalogu."""

    def __init__(self, db: Session):
        self.db = db

    def find_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(self) -> list[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel).order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            ).scalars().all()
        )

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: ProductModel) -> ProductModel:
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()
