#shopcart/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from shopcart.api.dependencies import get_current_user_id
from shopcart.data.database import get_db
from shopcart.domain.errors import NotFoundError
from shopcart.domain.schemas import ItemIn, CartOut, CartTotalOut
from shopcart.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("/", response_model=CartOut)
def get_cart(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).get_cart(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/total", response_model=CartTotalOut)
def get_cart_total(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return {"user_id": user_id, "total": get_service(db).get_total(user_id)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/items", response_model=CartOut)
def add_item(
    payload: ItemIn,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).add_item(
            user_id=user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(
    product_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).remove_item(user_id, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/", status_code=204)
def clear_cart(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    get_service(db).clear_cart(user_id)
    return Response(status_code=204)
