# baglemonster/services/product_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from baglemonster.data.database import transaction
from baglemonster.data.models.product import ProductModel
from baglemonster.data.models.user import UserModel
from baglemonster.domain.exceptions import NotFoundError
from baglemonster.domain.schemas import ProductRequest
from baglemonster.repos.product_repo import ProductRepo
from baglemonster.services.store_service import StoreService
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)


def product_view(product: ProductModel) -> Dict[str, Any]:
    return {
        "id": product.id,
        "store_id": product.store_id,
        "name": product.name,
        "price": product.price,
        "description": product.description,
    }


class ProductService:
    def __init__(self, db: Session, store_service: StoreService | None = None):
        self.db = db
        self.repo = ProductRepo(db)
        self.store_service = store_service or StoreService(db)

    def select_products(self, store_id: int) -> List[Dict[str, Any]]:
        store = self.store_service.find_store(store_id)
        return [product_view(p) for p in self.repo.get_products_by_store(store.id)]

    def select_product(self, product_id: int) -> Dict[str, Any]:
        return product_view(self.find_product(product_id))

    def create_product(self, store_id: int, request: ProductRequest, user: UserModel) -> Dict[str, Any]:
        with transaction(self.db):
            store = self.store_service.find_store(store_id)
            self.store_service.check_owner(store, user, "Brak uprawnień do dodawania produktów")

            product = self.repo.add_product(
                ProductModel(
                    store_id=store.id,
                    name=request.name,
                    price=request.price,
                    description=request.description,
                )
            )

        logger.info(f"Dodano produkt {product.id} do sklepu {store_id}")
        return product_view(product)

    def find_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Wybrany produkt nie istnieje")
        return product
