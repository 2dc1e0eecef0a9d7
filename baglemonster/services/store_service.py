# baglemonster/services/store_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from baglemonster.data.database import transaction
from baglemonster.data.models.store import StoreModel
from baglemonster.data.models.user import UserModel
from baglemonster.domain.enums import UserRole
from baglemonster.domain.exceptions import ConflictError, NotFoundError, UnauthorizedError
from baglemonster.domain.schemas import StoreRequest
from baglemonster.repos.store_repo import StoreRepo
from baglemonster.services.user_service import UserService
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)


def store_view(store: StoreModel) -> Dict[str, Any]:
    return {
        "id": store.id,
        "user_id": store.user_id,
        "name": store.name,
        "description": store.description,
        "address": store.address,
        "phone_number": store.phone_number,
    }


class StoreService:
    """
    Zarzadzanie sklepami.
    Zapis tylko dla roli STORE, edycja i usuwanie tylko przez wlasciciela (albo ADMIN).
    """

    def __init__(self, db: Session, user_service: UserService | None = None):
        self.db = db
        self.repo = StoreRepo(db)
        self.user_service = user_service or UserService(db)

    #query
    def select_stores(self) -> List[Dict[str, Any]]:
        return [store_view(s) for s in self.repo.get_stores()]

    def select_store(self, store_id: int) -> Dict[str, Any]:
        return store_view(self.find_store(store_id))

    def select_my_store(self, user: UserModel) -> Dict[str, Any]:
        store_user = self.user_service.find_user(user.id)
        store = self.repo.get_store_by_user(store_user.id)
        if not store:
            raise NotFoundError("Użytkownik nie posiada sklepu")
        return store_view(store)

    #commands
    def create_store(self, request: StoreRequest, user: UserModel) -> Dict[str, Any]:
        if user.role != UserRole.STORE:
            raise UnauthorizedError("Brak uprawnień do rejestracji sklepu")

        with transaction(self.db):
            owner = self.user_service.find_user(user.id)
            if self.repo.get_store_by_user(owner.id):
                raise ConflictError("Użytkownik posiada już sklep")

            store = self.repo.add_store(
                StoreModel(
                    user_id=owner.id,
                    name=request.name,
                    description=request.description,
                    address=request.address,
                    phone_number=request.phone_number,
                )
            )

        logger.info(f"Utworzono sklep {store.id} dla uzytkownika {user.id}")
        return store_view(store)

    def modify_store(self, store_id: int, request: StoreRequest, user: UserModel) -> Dict[str, Any]:
        with transaction(self.db):
            store = self.find_store(store_id)
            self.check_owner(store, user, "Brak uprawnień do edycji sklepu")

            #pelna podmiana pol
            store.name = request.name
            store.description = request.description
            store.address = request.address
            store.phone_number = request.phone_number
            self.db.flush()

        logger.info(f"Zmieniono sklep {store_id}")
        return store_view(store)

    def delete_store(self, store_id: int, user: UserModel) -> None:
        with transaction(self.db):
            store = self.find_store(store_id)
            self.check_owner(store, user, "Brak uprawnień do usunięcia sklepu")
            if self.repo.has_carts(store.id):
                raise ConflictError("Nie można usunąć sklepu, który ma koszyki lub zamówienia")
            self.repo.delete_store(store)

        logger.info(f"Usunieto sklep {store_id}")

    #lookup
    def find_store(self, store_id: int) -> StoreModel:
        store = self.repo.get_store(store_id)
        if not store:
            raise NotFoundError("Wybrany sklep nie istnieje")
        return store

    @staticmethod
    def check_owner(store: StoreModel, user: UserModel, message: str) -> None:
        if user.role == UserRole.ADMIN:
            return
        if user.role != UserRole.STORE or store.user_id != user.id:
            raise UnauthorizedError(message)
