# baglemonster/data/models/cart.py
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import relationship

from baglemonster.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"
    # co najwyzej jeden otwarty koszyk na uzytkownika
    __table_args__ = (
        Index(
            "uq_carts_open_per_user",
            "user_id",
            unique=True,
            postgresql_where=text("NOT status"),
            sqlite_where=text("NOT status"),
        ),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)

    # False = otwarty, True = zamowiony
    status = Column(Boolean, nullable=False, default=False)
    total_price = Column(Integer, nullable=False, default=0)
    version = Column(Integer, nullable=False, default=1)

    delivery_address = Column(String(255), nullable=True)
    phone_number = Column(String(30), nullable=True)
    request_message = Column(Text, nullable=True)
    ordered_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    user = relationship("UserModel")
    store = relationship("StoreModel")
    cart_products = relationship(
        "CartProductModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartProductModel.id",
    )
