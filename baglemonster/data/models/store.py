from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from baglemonster.data.database import Base


class StoreModel(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True)
    # jeden uzytkownik = jeden sklep
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    address = Column(String(255), nullable=True)
    phone_number = Column(String(30), nullable=True)

    user = relationship("UserModel", back_populates="store")
    products = relationship(
        "ProductModel",
        back_populates="store",
        cascade="all, delete-orphan",
    )
