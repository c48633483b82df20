# shopcart/repos/user_repo.py
from sqlalchemy.orm import Session
from shopcart.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def exists(self, user_id: int) -> bool:
        return self.find_user(user_id) is not None

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
