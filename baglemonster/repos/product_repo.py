# baglemonster/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from baglemonster.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_products_by_store(self, store_id: int) -> list[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel)
                .where(ProductModel.store_id == store_id)
                .order_by(ProductModel.id)
            ).scalars().all()
        )

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        self.db.refresh(product)
        return product
