# distress/services/dashboard_service.py
from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from distress.models.case import Case
from distress.schemas.dashboard import DashboardStats, RecentCaseOut

RECENT_CASES_LIMIT = 5


class DashboardService:
    """Aggregate case counts, computed fresh on every call."""

    def __init__(self, db: Session):
        self.db = db

    def _count_by(self, column) -> Dict[str, int]:
        rows = self.db.query(column, func.count(Case.id)).group_by(column).all()
        return {value: count for value, count in rows}

    def get_stats(self) -> DashboardStats:
        total = self.db.query(func.count(Case.id)).scalar() or 0
        recent = (
            self.db.query(Case.id, Case.reference_number, Case.subject, Case.status, Case.nature_of_case)
            .order_by(Case.created_at.desc(), Case.id.desc())
            .limit(RECENT_CASES_LIMIT)
            .all()
        )
        return DashboardStats(
            total_cases=total,
            cases_by_status=self._count_by(Case.status),
            cases_by_nature=self._count_by(Case.nature_of_case),
            cases_by_country_origin=self._count_by(Case.country_of_origin),
            recent_cases=[
                RecentCaseOut(
                    id=r.id,
                    reference_number=r.reference_number,
                    subject=r.subject,
                    status=r.status,
                    nature_of_case=r.nature_of_case,
                )
                for r in recent
            ],
        )
