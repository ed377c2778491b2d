# distress/schemas/progress_note.py
from datetime import datetime

from pydantic import BaseModel


class ProgressNoteCreate(BaseModel):
    user_id: int
    note: str


class ProgressNoteOut(BaseModel):
    id: int
    case_id: int
    user_id: int
    note: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
