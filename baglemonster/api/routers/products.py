from fastapi import APIRouter, Depends

from baglemonster.api.deps import DOMAIN_ERRORS, get_product_service, to_http
from baglemonster.domain.schemas import ProductOut
from baglemonster.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/{product_id}", response_model=ProductOut)
def select_product(product_id: int, svc: ProductService = Depends(get_product_service)):
    try:
        return svc.select_product(product_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
