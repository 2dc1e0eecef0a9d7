# baglemonster/repos/store_repo.py
from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from baglemonster.data.models.cart import CartModel
from baglemonster.data.models.store import StoreModel


class StoreRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_store(self, store_id: int) -> StoreModel | None:
        return self.db.get(StoreModel, store_id)

    def get_stores(self) -> list[StoreModel]:
        return list(self.db.execute(select(StoreModel).order_by(StoreModel.id)).scalars().all())

    def get_store_by_user(self, user_id: int) -> StoreModel | None:
        return self.db.execute(
            select(StoreModel).where(StoreModel.user_id == user_id)
        ).scalar_one_or_none()

    def has_carts(self, store_id: int) -> bool:
        #otwarte i zamowione koszyki, historia zamowien trzyma FK do sklepu
        return self.db.execute(
            select(exists().where(CartModel.store_id == store_id))
        ).scalar()

    def add_store(self, store: StoreModel) -> StoreModel:
        self.db.add(store)
        self.db.flush()
        self.db.refresh(store)
        return store

    def delete_store(self, store: StoreModel) -> None:
        self.db.delete(store)
        self.db.flush()
