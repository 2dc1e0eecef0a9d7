# baglemonster/services/cart_service.py
from datetime import datetime, timezone
from typing import Any, Dict, List

from kombu.exceptions import OperationalError
from sqlalchemy.orm import Session

from baglemonster.data.database import transaction
from baglemonster.data.models.cart import CartModel
from baglemonster.data.models.cart_product import CartProductModel
from baglemonster.data.models.user import UserModel
from baglemonster.domain.enums import CartStatus
from baglemonster.domain.exceptions import (
    ConcurrencyError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
)
from baglemonster.domain.schemas import CartRequest, OrderRequest
from baglemonster.repos.cart_repo import CartRepo
from baglemonster.services.lock_service import LockService, cart_lock_key, user_cart_lock_key
from baglemonster.services.notification_service import NotificationService
from baglemonster.services.product_service import ProductService
from baglemonster.services.store_service import StoreService
from baglemonster.services.user_service import UserService
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)


def cart_view(cart: CartModel) -> Dict[str, Any]:
    items = [
        {
            "product_id": cp.product_id,
            "name": cp.product.name,
            "price": cp.product.price,
            "quantity": cp.quantity,
            "line_total": cp.product.price * cp.quantity,
        }
        for cp in cart.cart_products
    ]
    return {
        "cart_id": cart.id,
        "user_id": cart.user_id,
        "store_id": cart.store_id,
        "store_name": cart.store.name,
        "status": CartStatus.of(cart.status),
        "ordered": cart.status,
        "items": items,
        "total_price": cart.total_price,
        "delivery_address": cart.delivery_address,
        "phone_number": cart.phone_number,
        "request_message": cart.request_message,
        "ordered_at": cart.ordered_at,
    }


def cart_product_view(cart_product: CartProductModel, quantity: int | None = None) -> Dict[str, Any]:
    return {
        "cart_id": cart_product.cart_id,
        "product_id": cart_product.product_id,
        "name": cart_product.product.name,
        "price": cart_product.product.price,
        "quantity": cart_product.quantity if quantity is None else quantity,
    }


class CartService:
    """
    Cykl zycia koszyka: dodawanie pozycji, zmiana ilosci, usuwanie, zamowienie.

    Niezmienniki:
    - co najwyzej jeden otwarty koszyk (status=False) na uzytkownika
    - wszystkie pozycje koszyka pochodza z jednego sklepu
    - jedna pozycja na pare (koszyk, produkt)
    - total_price = suma price * quantity, przeliczana po kazdej zmianie pozycji

    Kazda komenda to jedna transakcja, koszyk trzymany pod lockiem redis,
    a zapis koszyka idzie przez optimistic locking na kolumnie version.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService,
        user_service: UserService | None = None,
        store_service: StoreService | None = None,
        product_service: ProductService | None = None,
    ):
        self.db = db
        self.repo = CartRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service
        self.user_service = user_service or UserService(db)
        self.store_service = store_service or StoreService(db, self.user_service)
        self.product_service = product_service or ProductService(db, self.store_service)

    #query
    def select_cart(self, user: UserModel) -> Dict[str, Any]:
        consumer = self.user_service.find_user(user.id)
        cart = self.repo.get_open_cart_by_user(consumer.id)
        if not cart:
            raise NotFoundError("Użytkownik nie ma otwartego koszyka")
        return cart_view(cart)

    def select_carts(self, user: UserModel) -> List[Dict[str, Any]]:
        consumer = self.user_service.find_user(user.id)
        return [cart_view(c) for c in self.repo.get_carts_by_user(consumer.id)]

    #commands
    def create_cart(self, request: CartRequest, user: UserModel) -> None:
        with self.lock_service.hold(user_cart_lock_key(user.id)):
            with transaction(self.db):
                consumer = self.user_service.find_user(user.id)
                cart = self._get_or_create_open_cart(consumer, request.store_id)

                product = self.product_service.find_product(request.product_id)
                if product.store_id != cart.store_id:
                    raise ConflictError("Produkt nie należy do sklepu z koszyka")

                if self.repo.get_cart_product(cart.id, product.id):
                    raise ConflictError("Ten produkt jest już w koszyku")

                self.repo.add_cart_product(
                    cart,
                    CartProductModel(product_id=product.id, quantity=request.quantity),
                )
                self._save_cart(cart)

                logger.info(
                    f"Dodano produkt {product.id} x{request.quantity} do koszyka {cart.id}, "
                    f"suma {cart.total_price}"
                )

    def add_cart_product(self, cart_id: int, product_id: int, user: UserModel) -> Dict[str, Any]:
        with self.lock_service.hold(cart_lock_key(cart_id)):
            with transaction(self.db):
                cart, cart_product = self._get_cart_product(cart_id, product_id, user)
                self._ensure_open(cart)

                cart_product.quantity += 1
                self._save_cart(cart)
                view = cart_product_view(cart_product)

        logger.info(f"Zwiekszono ilosc produktu {product_id} w koszyku {cart_id} do {view['quantity']}")
        return view

    def subtract_cart_product(self, cart_id: int, product_id: int, user: UserModel) -> Dict[str, Any]:
        with self.lock_service.hold(cart_lock_key(cart_id)):
            with transaction(self.db):
                cart, cart_product = self._get_cart_product(cart_id, product_id, user)
                self._ensure_open(cart)

                if cart_product.quantity <= 1:
                    # ilosc spada do 0 -> pozycja znika
                    view = cart_product_view(cart_product, quantity=0)
                    self.repo.delete_cart_product(cart_product)
                else:
                    cart_product.quantity -= 1
                    view = cart_product_view(cart_product)
                self._save_cart(cart)

        logger.info(f"Zmniejszono ilosc produktu {product_id} w koszyku {cart_id} do {view['quantity']}")
        return view

    def delete_cart_product(self, cart_id: int, product_id: int, user: UserModel) -> None:
        with self.lock_service.hold(cart_lock_key(cart_id)):
            with transaction(self.db):
                cart, cart_product = self._get_cart_product(cart_id, product_id, user)
                self._ensure_open(cart)

                self.repo.delete_cart_product(cart_product)
                self._save_cart(cart)

        logger.info(f"Usunieto produkt {product_id} z koszyka {cart_id}")

    def delete_cart(self, cart_id: int, user: UserModel) -> None:
        with self.lock_service.hold(cart_lock_key(cart_id)):
            with transaction(self.db):
                cart = self._get_owned_cart(cart_id, user)
                # pozycje usuwane kaskadowo
                self.repo.delete_cart(cart)

        logger.info(f"Usunieto koszyk {cart_id}")

    def order_cart(self, cart_id: int, request: OrderRequest, user: UserModel) -> Dict[str, Any]:
        with self.lock_service.hold(cart_lock_key(cart_id)):
            with transaction(self.db):
                cart = self._get_owned_cart(cart_id, user)

                if cart.status:
                    raise ConflictError("Koszyk został już zamówiony")
                if not cart.cart_products:
                    raise ConflictError("Nie można zamówić pustego koszyka")

                # przejscie jednokierunkowe OPEN -> ORDERED
                self._save_cart(
                    cart,
                    status=True,
                    delivery_address=request.delivery_address,
                    phone_number=request.phone_number,
                    request_message=request.request_message,
                    ordered_at=datetime.now(timezone.utc),
                )
                view = cart_view(cart)

        logger.info(f"Zamowiono koszyk {cart_id}, suma {view['total_price']}")
        try:
            self.notification_service.send_order_notification(user.id, cart_id)
        except OperationalError as e:
            # zamowienie jest juz zapisane, brak brokera nie cofa commita
            logger.error(f"Nie udalo sie wyslac powiadomienia dla koszyka {cart_id}: {e}")
        return view

    # ------------metody pomocnicze--------------

    def _get_or_create_open_cart(self, user: UserModel, store_id: int) -> CartModel:
        cart = self.repo.get_open_cart_by_user(user.id)

        if cart:
            # inny sklep w koszyku -> wyjatek
            if cart.store_id != store_id:
                raise ConflictError("W koszyku są już produkty z innego sklepu")
            return cart

        store = self.store_service.find_store(store_id)
        created = self.repo.add_cart(
            CartModel(user_id=user.id, store_id=store.id, status=False, total_price=0, version=1)
        )
        logger.info(f"Utworzono nowy koszyk {created.id} dla uzytkownika {user.id}")
        return created

    def _get_owned_cart(self, cart_id: int, user: UserModel) -> CartModel:
        cart = self.repo.get_cart(cart_id)
        if not cart:
            raise NotFoundError("Wybrany koszyk nie istnieje")
        if cart.user_id != user.id:
            raise UnauthorizedError("Brak dostępu do koszyka")
        return cart

    def _get_cart_product(self, cart_id: int, product_id: int, user: UserModel):
        cart = self._get_owned_cart(cart_id, user)
        product = self.product_service.find_product(product_id)
        cart_product = self.repo.get_cart_product(cart.id, product.id)
        if not cart_product:
            raise NotFoundError("Wybrany produkt nie znajduje się w koszyku")
        return cart, cart_product

    @staticmethod
    def _ensure_open(cart: CartModel) -> None:
        if cart.status:
            raise ConflictError("Zamówionego koszyka nie można modyfikować")

    def _save_cart(self, cart: CartModel, **changes) -> None:
        """
        Przelicza total_price z aktualnych pozycji i zapisuje koszyk
        warunkowo na wersji (update ... where version = v).
        """
        total = sum(cp.product.price * cp.quantity for cp in cart.cart_products)

        rowcount = self.repo.update_cart_version(
            cart_id=cart.id,
            old_version=cart.version,
            new_data={
                "version": cart.version + 1,
                "total_price": total,
                **changes,
            },
        )

        # np w bazie update set version 2 where id 1 and version 1
        if rowcount == 0:
            raise ConcurrencyError(
                "Konflikt współbieżności - koszyk został zmodyfikowany przez inną operację"
            )
