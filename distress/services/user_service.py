# distress/services/user_service.py
import logging
from typing import List

from sqlalchemy.orm import Session

from distress.core.errors import Conflict, NotFound, ValidationError
from distress.core.security import hash_password, verify_password
from distress.db.session import atomic, utcnow
from distress.models.user import User
from distress.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def create_user(self, payload: UserCreate) -> User:
        email = (payload.email or "").strip().lower()
        if not email:
            raise ValidationError("email is required")
        if not (payload.password or "").strip():
            raise ValidationError("password is required")
        if self.db.query(User.id).filter(User.email == email).first():
            raise Conflict("email already exists")

        now = utcnow()
        user = User(
            name=payload.name,
            email=email,
            password=hash_password(payload.password),
            role=payload.role,
            department=payload.department,
            active=True,
            last_login=None,
            created_at=now,
            updated_at=now,
        )
        with atomic(self.db, "create user"):
            self.db.add(user)
        logger.info("Created user %s (id=%s, role=%s)", user.email, user.id, user.role)
        return user

    def get_user(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFound(f"User {user_id} not found")
        return user

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    def authenticate(self, email: str, password: str) -> User:
        user = self.db.query(User).filter(User.email == (email or "").strip().lower()).first()
        if not user or not user.active or not verify_password(password, user.password):
            raise ValidationError("Invalid email or password")
        with atomic(self.db, "record login"):
            user.last_login = utcnow()
        return user
