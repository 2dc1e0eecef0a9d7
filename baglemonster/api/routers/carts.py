#baglemonster/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, Response

from baglemonster.api.deps import DOMAIN_ERRORS, get_cart_service, get_current_user, to_http
from baglemonster.data.models.user import UserModel
from baglemonster.domain.schemas import (
    CartOut,
    CartProductOut,
    CartRequest,
    MessageOut,
    OrderRequest,
)
from baglemonster.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.post("/", response_model=MessageOut, status_code=201)
def create_cart(
    payload: CartRequest,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        svc.create_cart(payload, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
    return {"message": "Produkt dodany do koszyka"}


@router.get("/me", response_model=CartOut)
def select_cart(
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.select_cart(user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.get("/", response_model=List[CartOut])
def select_carts(
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    """Historia koszykow uzytkownika (otwarte i zamowione)."""
    try:
        return svc.select_carts(user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.patch("/{cart_id}/products/{product_id}/add", response_model=CartProductOut)
def add_cart_product(
    cart_id: int,
    product_id: int,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.add_cart_product(cart_id, product_id, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.patch("/{cart_id}/products/{product_id}/subtract", response_model=CartProductOut)
def subtract_cart_product(
    cart_id: int,
    product_id: int,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.subtract_cart_product(cart_id, product_id, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.delete("/{cart_id}/products/{product_id}", status_code=204)
def delete_cart_product(
    cart_id: int,
    product_id: int,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        svc.delete_cart_product(cart_id, product_id, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
    return Response(status_code=204)


@router.delete("/{cart_id}", status_code=204)
def delete_cart(
    cart_id: int,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        svc.delete_cart(cart_id, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
    return Response(status_code=204)


@router.post("/{cart_id}/order", response_model=CartOut)
def order_cart(
    cart_id: int,
    payload: OrderRequest,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.order_cart(cart_id, payload, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
