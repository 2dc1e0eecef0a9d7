# baglemonster/data/seed.py
from sqlalchemy.orm import Session

from baglemonster.data.database import SessionLocal, transaction
from baglemonster.data.models import ProductModel, StoreModel, UserModel
from baglemonster.domain.enums import UserRole
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    ("Plain Bagel", 2500),
    ("Cream Cheese Bagel", 3500),
    ("Blueberry Bagel", 3000),
]


def seed(db: Session | None = None) -> bool:
    """Dane demo: konsument, wlasciciel sklepu, sklep i produkty. Tylko do pustej bazy."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(UserModel).first():
            return False

        with transaction(db):
            consumer = UserModel(name="consumer", role=UserRole.CONSUMER)
            owner = UserModel(name="store-owner", role=UserRole.STORE)
            db.add_all([consumer, owner])
            db.flush()

            store = StoreModel(user_id=owner.id, name="Bagle Monster", description="Bagels baked daily")
            store.products = [ProductModel(name=name, price=price) for name, price in PRODUCTS]
            db.add(store)

        logger.info("Seeded demo users, store and products")
        return True
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    seed()
