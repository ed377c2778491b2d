# distress/api/v1/notes.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from distress.core.dependencies import get_db
from distress.schemas.progress_note import ProgressNoteCreate, ProgressNoteOut
from distress.services.progress_note_service import ProgressNoteService

router = APIRouter()


@router.post("/{case_id}/notes", response_model=ProgressNoteOut, status_code=201)
def add_progress_note(case_id: int, payload: ProgressNoteCreate, db: Session = Depends(get_db)):
    return ProgressNoteService(db).add_note(case_id, payload.user_id, payload.note)


@router.get("/{case_id}/notes", response_model=List[ProgressNoteOut])
def list_progress_notes(case_id: int, db: Session = Depends(get_db)):
    return ProgressNoteService(db).list_notes(case_id)
