from sqlalchemy.orm import Session
from baglemonster.data.database import transaction
from baglemonster.data.models.user import UserModel
from baglemonster.domain.exceptions import NotFoundError
from baglemonster.repos.user_repo import UserRepo
from baglemonster.domain.schemas import UserCreate, UserRead
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        with transaction(self.db):
            user = UserModel(name=payload.name, role=payload.role)
            created = self.repo.create_user(user)

        logger.info(f"Utworzono uzytkownika {created.id} z rola {created.role.value}")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        return UserRead.model_validate(self.find_user(user_id))

    def find_user(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("Wybrany użytkownik nie istnieje")
        return user
