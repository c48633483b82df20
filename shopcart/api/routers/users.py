from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from shopcart.data.database import get_db
from shopcart.domain.errors import NotFoundError
from shopcart.services.user_service import UserService
from shopcart.domain.schemas import UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])

@router.post("/", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)

@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    try:
        return UserService(db).get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
