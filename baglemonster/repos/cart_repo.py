# baglemonster/repos/cart_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from baglemonster.data.models.cart import CartModel
from baglemonster.data.models.cart_product import CartProductModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    # koszyki
    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def get_open_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(
                CartModel.user_id == user_id,
                CartModel.status.is_(False),
            )
        ).scalar_one_or_none()

    def get_carts_by_user(self, user_id: int) -> list[CartModel]:
        return list(
            self.db.execute(
                select(CartModel)
                .where(CartModel.user_id == user_id)
                .order_by(CartModel.id)
            ).scalars().all()
        )

    def add_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        self.db.refresh(cart)
        return cart

    def delete_cart(self, cart: CartModel) -> None:
        self.db.delete(cart)
        self.db.flush()

    def update_cart_version(self, cart_id: int, old_version: int, new_data: dict) -> int:
        """
        Optimistic locking: update set version = v + 1 where id = ? and version = v.
        Zwraca liczbe zmienionych wierszy (0 = konflikt).
        """
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(**new_data)
        )
        return result.rowcount

    # pozycje koszyka
    def get_cart_product(self, cart_id: int, product_id: int) -> CartProductModel | None:
        return self.db.execute(
            select(CartProductModel).where(
                CartProductModel.cart_id == cart_id,
                CartProductModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def add_cart_product(self, cart: CartModel, cart_product: CartProductModel) -> CartProductModel:
        #przez relacje, zeby kolekcja w sesji byla aktualna
        cart.cart_products.append(cart_product)
        self.db.flush()
        return cart_product

    def delete_cart_product(self, cart_product: CartProductModel) -> None:
        cart_product.cart.cart_products.remove(cart_product)
        self.db.delete(cart_product)
        self.db.flush()
