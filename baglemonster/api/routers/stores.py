#baglemonster/api/routers/stores.py
from typing import List

from fastapi import APIRouter, Depends, Response

from baglemonster.api.deps import (
    DOMAIN_ERRORS,
    get_current_user,
    get_product_service,
    get_store_service,
    to_http,
)
from baglemonster.data.models.user import UserModel
from baglemonster.domain.schemas import ProductOut, ProductRequest, StoreOut, StoreRequest
from baglemonster.services.product_service import ProductService
from baglemonster.services.store_service import StoreService

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("/", response_model=List[StoreOut])
def select_stores(svc: StoreService = Depends(get_store_service)):
    return svc.select_stores()


# przed /{store_id}, inaczej "me" trafi jako ID
@router.get("/me", response_model=StoreOut)
def select_my_store(
    user: UserModel = Depends(get_current_user),
    svc: StoreService = Depends(get_store_service),
):
    try:
        return svc.select_my_store(user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.get("/{store_id}", response_model=StoreOut)
def select_store(store_id: int, svc: StoreService = Depends(get_store_service)):
    try:
        return svc.select_store(store_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.post("/", response_model=StoreOut, status_code=201)
def create_store(
    payload: StoreRequest,
    user: UserModel = Depends(get_current_user),
    svc: StoreService = Depends(get_store_service),
):
    try:
        return svc.create_store(payload, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.put("/{store_id}", response_model=StoreOut)
def modify_store(
    store_id: int,
    payload: StoreRequest,
    user: UserModel = Depends(get_current_user),
    svc: StoreService = Depends(get_store_service),
):
    try:
        return svc.modify_store(store_id, payload, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.delete("/{store_id}", status_code=204)
def delete_store(
    store_id: int,
    user: UserModel = Depends(get_current_user),
    svc: StoreService = Depends(get_store_service),
):
    try:
        svc.delete_store(store_id, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
    return Response(status_code=204)


@router.get("/{store_id}/products", response_model=List[ProductOut])
def select_products(store_id: int, svc: ProductService = Depends(get_product_service)):
    try:
        return svc.select_products(store_id)
    except DOMAIN_ERRORS as e:
        raise to_http(e)


@router.post("/{store_id}/products", response_model=ProductOut, status_code=201)
def create_product(
    store_id: int,
    payload: ProductRequest,
    user: UserModel = Depends(get_current_user),
    svc: ProductService = Depends(get_product_service),
):
    try:
        return svc.create_product(store_id, payload, user)
    except DOMAIN_ERRORS as e:
        raise to_http(e)
