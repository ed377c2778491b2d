# distress/models/__init__.py
from distress.models import case, document, progress_note, user
from distress.models.case import Case, CaseStage, CaseStatus
from distress.models.document import Document
from distress.models.progress_note import ProgressNote
from distress.models.user import User

__all__ = [
    "case",
    "document",
    "progress_note",
    "user",
    "Case",
    "CaseStage",
    "CaseStatus",
    "Document",
    "ProgressNote",
    "User",
]
