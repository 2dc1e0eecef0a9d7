"""
Shared fixtures.

Every test gets its own in-memory SQLite database, a LockService backed by an
in-memory stand-in for the redis client and a mocked notification service, so
no postgres, redis or celery broker is needed.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from baglemonster.data.database import Base
from baglemonster.data.models import ProductModel, StoreModel, UserModel
from baglemonster.domain.enums import UserRole
from baglemonster.services.cart_service import CartService
from baglemonster.services.lock_service import LockService
from baglemonster.services.product_service import ProductService
from baglemonster.services.store_service import StoreService
from baglemonster.services.user_service import UserService


class InMemoryRedis:
    """Covers the two redis calls LockService makes: SET NX EX and the release script."""

    def __init__(self):
        self.store = {}

    def set(self, name, value, nx=False, ex=None):
        if nx and name in self.store:
            return None
        self.store[name] = value
        return True

    def eval(self, script, numkeys, key, token):
        if self.store.get(key) == token:
            del self.store[key]
            return 1
        return 0


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def lock_service(fake_redis):
    return LockService(client=fake_redis)


@pytest.fixture
def notifications():
    return Mock()


@pytest.fixture
def cart_service(db_session, lock_service, notifications):
    return CartService(
        db=db_session,
        lock_service=lock_service,
        notification_service=notifications,
    )


@pytest.fixture
def store_service(db_session):
    return StoreService(db_session)


@pytest.fixture
def product_service(db_session):
    return ProductService(db_session)


@pytest.fixture
def user_service(db_session):
    return UserService(db_session)


def _add(session, obj):
    session.add(obj)
    session.commit()
    return obj


@pytest.fixture
def make_user(db_session):
    def _make(name="user", role=UserRole.CONSUMER):
        return _add(db_session, UserModel(name=name, role=role))

    return _make


@pytest.fixture
def consumer(make_user):
    return make_user("consumer")


@pytest.fixture
def other_consumer(make_user):
    return make_user("other-consumer")


@pytest.fixture
def store_owner(make_user):
    return make_user("owner", UserRole.STORE)


@pytest.fixture
def other_store_owner(make_user):
    return make_user("other-owner", UserRole.STORE)


@pytest.fixture
def admin(make_user):
    return make_user("admin", UserRole.ADMIN)


@pytest.fixture
def store(db_session, store_owner):
    return _add(db_session, StoreModel(user_id=store_owner.id, name="Bagle Monster", description="bagels"))


@pytest.fixture
def other_store(db_session, other_store_owner):
    return _add(db_session, StoreModel(user_id=other_store_owner.id, name="Donut Town"))


@pytest.fixture
def make_product(db_session):
    def _make(store, name="Plain Bagel", price=500):
        return _add(db_session, ProductModel(store_id=store.id, name=name, price=price))

    return _make


@pytest.fixture
def product(make_product, store):
    return make_product(store, "Plain Bagel", 500)


@pytest.fixture
def second_product(make_product, store):
    return make_product(store, "Sesame Bagel", 700)


@pytest.fixture
def foreign_product(make_product, other_store):
    return make_product(other_store, "Glazed Donut", 300)
