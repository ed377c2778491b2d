# distress/api/api_router.py
from fastapi import APIRouter

from distress.api.v1 import cases, dashboard, documents, notes, users

api_router = APIRouter()
api_router.include_router(cases.router, prefix="/v1/cases", tags=["cases"])
api_router.include_router(documents.router, prefix="/v1/cases", tags=["documents"])
api_router.include_router(notes.router, prefix="/v1/cases", tags=["progress-notes"])
api_router.include_router(dashboard.router, prefix="/v1/dashboard", tags=["dashboard"])
api_router.include_router(users.router, prefix="/v1/users", tags=["users"])
