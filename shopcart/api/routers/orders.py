# shopcart/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shopcart.api.dependencies import get_current_user_id
from shopcart.data.database import get_db
from shopcart.domain.errors import NotFoundError, EmptyCartError, ForbiddenError, InvalidStateError
from shopcart.domain.schemas import OrderOut
from shopcart.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamówienie z koszyka użytkownika i czyści koszyk.
    """
    try:
        return get_service(db).create_order(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/", response_model=List[OrderOut])
def list_orders(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return get_service(db).list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia.
    """
    try:
        return get_service(db).get_order(user_id, order_id)
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{order_id}/cancel", response_model=OrderOut)
def cancel_order(
    order_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.cancel_order(user_id, order_id)
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
