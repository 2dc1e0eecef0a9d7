#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from baglemonster.data.models.user import UserModel
from baglemonster.data.models.store import StoreModel
from baglemonster.data.models.product import ProductModel
from baglemonster.data.models.cart import CartModel
from baglemonster.data.models.cart_product import CartProductModel

__all__ = ["UserModel", "StoreModel", "ProductModel", "CartModel", "CartProductModel"]
