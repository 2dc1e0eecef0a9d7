from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from baglemonster.data.database import Base
from baglemonster.domain.enums import UserRole


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.CONSUMER)

    store = relationship("StoreModel", back_populates="user", uselist=False)
