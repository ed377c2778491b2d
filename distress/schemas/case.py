# distress/schemas/case.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from distress.models.case import CaseStage, CaseStatus
from distress.schemas.document import DocumentOut
from distress.schemas.progress_note import ProgressNoteOut


class CaseCreate(BaseModel):
    sender_name: str
    subject: str
    country_of_origin: str
    distressed_person_name: str
    nature_of_case: str
    case_details: str


class CaseUpdate(CaseCreate):
    """Full replacement of the descriptive fields."""


class CaseStatusUpdate(BaseModel):
    status: CaseStatus
    stage: CaseStage


class CaseAssignment(BaseModel):
    assigned_officer_id: Optional[int] = None


class CaseOut(BaseModel):
    id: int
    reference_number: str
    sender_name: str
    receiving_date: datetime
    subject: str
    country_of_origin: str
    distressed_person_name: str
    nature_of_case: str
    case_details: str
    status: str
    stage: str
    assigned_officer_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CaseDetailOut(CaseOut):
    documents: List[DocumentOut] = []
    progress_notes: List[ProgressNoteOut] = []
