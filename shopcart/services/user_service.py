from sqlalchemy.orm import Session
from shopcart.data.models.user import UserModel
from shopcart.domain.errors import NotFoundError
from shopcart.repos.user_repo import UserRepo
from shopcart.domain.schemas import UserCreate, UserRead


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        #idempotentne, istniejacy user zwracany bez zmian
        existing = self.repo.find_user(payload.id)
        if existing:
            return UserRead.model_validate(existing)

        created = self.repo.create_user(UserModel(id=payload.id, name=payload.name))
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.find_user(user_id)
        if not user:
            raise NotFoundError(f"Uzytkownik {user_id} nie istnieje")
        return UserRead.model_validate(user)
