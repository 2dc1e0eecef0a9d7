# baglemonster/api/deps.py
from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from baglemonster.data.database import get_db
from baglemonster.data.models.user import UserModel
from baglemonster.domain.exceptions import (
    ConcurrencyError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
)
from baglemonster.services.cart_service import CartService
from baglemonster.services.lock_service import LockService
from baglemonster.services.notification_service import NotificationService
from baglemonster.services.product_service import ProductService
from baglemonster.services.store_service import StoreService
from baglemonster.services.user_service import UserService


def get_current_user(
    user_id: int = Query(..., gt=0, description="ID zalogowanego użytkownika"),
    db: Session = Depends(get_db),
) -> UserModel:
    # uwierzytelnianie poza zakresem serwisu, user przychodzi jako parametr
    try:
        return UserService(db).find_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=401, detail=str(e))


def get_lock_service() -> LockService:
    return LockService()


def get_notification_service() -> NotificationService:
    return NotificationService()


def get_cart_service(
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
    notification_service: NotificationService = Depends(get_notification_service),
) -> CartService:
    return CartService(
        db=db,
        lock_service=lock_service,
        notification_service=notification_service,
    )


def get_store_service(db: Session = Depends(get_db)) -> StoreService:
    return StoreService(db)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


# wyjatki domenowe -> kody HTTP
DOMAIN_ERRORS = (NotFoundError, UnauthorizedError, ConflictError, ConcurrencyError, ValueError)


def to_http(e: Exception) -> HTTPException:
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, UnauthorizedError):
        return HTTPException(status_code=403, detail=str(e))
    if isinstance(e, (ConflictError, ConcurrencyError)):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))
