# shopcart/api/dependencies.py
from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from shopcart.data.database import get_db
from shopcart.repos.user_repo import UserRepo


def get_current_user_id(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
) -> int:
    """user_id z query, musi wskazywac istniejacego uzytkownika."""
    if not UserRepo(db).exists(user_id):
        raise HTTPException(status_code=404, detail=f"Uzytkownik {user_id} nie istnieje")
    return user_id
