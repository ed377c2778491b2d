# distress/models/user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String

from distress.db.base import Base
from distress.db.session import utcnow


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, default="")
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash, never serialized
    role = Column(String(50), nullable=False, default="officer")
    department = Column(String(100), nullable=False, default="")
    active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
