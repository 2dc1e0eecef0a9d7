from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from baglemonster.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_product_price_non_negative"),)

    id = Column(Integer, primary_key=True)
    store_id = Column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    # cena w najmniejszej jednostce waluty
    price = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    store = relationship("StoreModel", back_populates="products")
