# distress/services/progress_note_service.py
from typing import List

from sqlalchemy.orm import Session

from distress.core.errors import NotFound, ValidationError
from distress.db.session import atomic, utcnow
from distress.models.case import Case
from distress.models.progress_note import ProgressNote
from distress.models.user import User


class ProgressNoteService:
    def __init__(self, db: Session):
        self.db = db

    def _require_case(self, case_id: int):
        if not self.db.query(Case.id).filter(Case.id == case_id).first():
            raise NotFound(f"Case {case_id} not found")

    def add_note(self, case_id: int, user_id: int, note: str) -> ProgressNote:
        if not (note or "").strip():
            raise ValidationError("note must not be empty")
        self._require_case(case_id)
        if not self.db.query(User.id).filter(User.id == user_id).first():
            raise NotFound(f"User {user_id} not found")

        now = utcnow()
        pn = ProgressNote(case_id=case_id, user_id=user_id, note=note, created_at=now, updated_at=now)
        with atomic(self.db, "add progress note"):
            self.db.add(pn)
        return pn

    def list_notes(self, case_id: int) -> List[ProgressNote]:
        self._require_case(case_id)
        return (
            self.db.query(ProgressNote)
            .filter(ProgressNote.case_id == case_id)
            .order_by(ProgressNote.created_at.desc(), ProgressNote.id.desc())
            .all()
        )
