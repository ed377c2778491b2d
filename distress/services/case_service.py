# distress/services/case_service.py
import logging
import uuid
from datetime import timedelta
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from distress.core.config import settings
from distress.core.errors import NotFound, ValidationError
from distress.db.session import atomic, utcnow
from distress.models.case import Case, CaseStage, CaseStatus
from distress.models.user import User
from distress.schemas.case import CaseCreate, CaseUpdate

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("subject", "nature_of_case")


def format_reference_number(number: int, prefix: str = None) -> str:
    return f"{prefix or settings.REFERENCE_PREFIX}{number:05d}"


def parse_status(value) -> CaseStatus:
    try:
        return CaseStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in CaseStatus)
        raise ValidationError(f"Invalid status {value!r}; expected one of: {allowed}")


def parse_stage(value) -> CaseStage:
    try:
        return CaseStage(value)
    except ValueError:
        allowed = ", ".join(s.value for s in CaseStage)
        raise ValidationError(f"Invalid stage {value!r}; expected one of: {allowed}")


class CaseService:
    def __init__(self, db: Session):
        self.db = db

    def _validate_fields(self, payload: CaseCreate):
        for field in REQUIRED_TEXT_FIELDS:
            if not (getattr(payload, field) or "").strip():
                raise ValidationError(f"{field} must not be empty")

    def _touch(self, case: Case):
        # updated_at must move forward even when the clock has not
        now = utcnow()
        if case.updated_at is not None and now <= case.updated_at:
            now = case.updated_at + timedelta(microseconds=1)
        case.updated_at = now

    def create_case(self, payload: CaseCreate) -> Case:
        self._validate_fields(payload)
        initial_stage = parse_stage(settings.INITIAL_STAGE)
        now = utcnow()
        c = Case(
            # unique placeholder until the id is known
            reference_number=f"PENDING-{uuid.uuid4().hex}",
            sender_name=payload.sender_name,
            subject=payload.subject.strip(),
            country_of_origin=payload.country_of_origin,
            distressed_person_name=payload.distressed_person_name,
            nature_of_case=payload.nature_of_case.strip(),
            case_details=payload.case_details,
            status=CaseStatus.PENDING.value,
            stage=initial_stage.value,
            receiving_date=now,
            created_at=now,
            updated_at=now,
        )
        with atomic(self.db, "create case"):
            self.db.add(c)
            self.db.flush()  # get id
            c.reference_number = format_reference_number(c.id)
        logger.info("Created case %s (id=%s)", c.reference_number, c.id)
        return c

    def get_case(self, case_id: int) -> Case:
        c = self.db.query(Case).filter(Case.id == case_id).first()
        if not c:
            raise NotFound(f"Case {case_id} not found")
        return c

    def get_case_detail(self, case_id: int) -> Case:
        c = (
            self.db.query(Case)
            .options(selectinload(Case.documents), selectinload(Case.progress_notes))
            .filter(Case.id == case_id)
            .populate_existing()
            .first()
        )
        if not c:
            raise NotFound(f"Case {case_id} not found")
        return c

    def list_cases(self, page: int = 1, limit: int = None) -> List[Case]:
        if limit is None:
            limit = settings.DEFAULT_PAGE_SIZE
        if page < 1:
            raise ValidationError("page must be >= 1")
        if limit < 1:
            raise ValidationError("limit must be >= 1")
        limit = min(limit, settings.MAX_PAGE_SIZE)
        return (
            self.db.query(Case)
            .order_by(Case.created_at.desc(), Case.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

    def update_case(self, case_id: int, payload: CaseUpdate) -> Case:
        self._validate_fields(payload)
        c = self.get_case(case_id)
        with atomic(self.db, "update case"):
            c.sender_name = payload.sender_name
            c.subject = payload.subject.strip()
            c.country_of_origin = payload.country_of_origin
            c.distressed_person_name = payload.distressed_person_name
            c.nature_of_case = payload.nature_of_case.strip()
            c.case_details = payload.case_details
            self._touch(c)
        return c

    def update_status(self, case_id: int, status, stage) -> Case:
        new_status = parse_status(status)
        new_stage = parse_stage(stage)
        c = self.get_case(case_id)
        old_status, old_stage = c.status, c.stage
        with atomic(self.db, "update case status"):
            c.status = new_status.value
            c.stage = new_stage.value
            self._touch(c)
        logger.info(
            "Case %s moved from %s/%s to %s/%s",
            c.reference_number, old_status, old_stage, c.status, c.stage,
        )
        return c

    def assign_officer(self, case_id: int, officer_id: Optional[int]) -> Case:
        c = self.get_case(case_id)
        if officer_id is not None:
            if not self.db.query(User.id).filter(User.id == officer_id).first():
                raise NotFound(f"User {officer_id} not found")
        with atomic(self.db, "assign case officer"):
            c.assigned_officer_id = officer_id
            self._touch(c)
        return c
