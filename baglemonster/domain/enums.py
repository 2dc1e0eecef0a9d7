# baglemonster/domain/enums.py
import enum


class UserRole(str, enum.Enum):
    CONSUMER = "CONSUMER"
    STORE = "STORE"
    ADMIN = "ADMIN"


class CartStatus(str, enum.Enum):
    OPEN = "OPEN"
    ORDERED = "ORDERED"

    @classmethod
    def of(cls, ordered: bool) -> "CartStatus":
        return cls.ORDERED if ordered else cls.OPEN
