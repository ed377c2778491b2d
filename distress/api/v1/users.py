# distress/api/v1/users.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from distress.core.dependencies import get_db
from distress.schemas.user import LoginRequest, UserCreate, UserOut
from distress.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.post("", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).get_user(user_id)


@router.post("/login", response_model=UserOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    Check credentials and stamp last_login (no token is issued)
    """
    return UserService(db).authenticate(payload.email, payload.password)
