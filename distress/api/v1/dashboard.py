# distress/api/v1/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from distress.core.dependencies import get_db
from distress.schemas.dashboard import DashboardStats
from distress.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return DashboardService(db).get_stats()
