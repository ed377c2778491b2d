# distress/api/v1/cases.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from distress.core.config import settings
from distress.core.dependencies import get_db
from distress.schemas.case import (
    CaseAssignment,
    CaseCreate,
    CaseDetailOut,
    CaseOut,
    CaseStatusUpdate,
    CaseUpdate,
)
from distress.services.case_service import CaseService

router = APIRouter()


@router.get("", response_model=List[CaseOut])
def list_cases(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    """
    List cases, newest first
    """
    return CaseService(db).list_cases(page=page, limit=limit)


@router.post("", response_model=CaseOut, status_code=201)
def create_case(payload: CaseCreate, db: Session = Depends(get_db)):
    return CaseService(db).create_case(payload)


@router.get("/{case_id}", response_model=CaseDetailOut)
def get_case(case_id: int, db: Session = Depends(get_db)):
    """
    Case with its documents and progress notes
    """
    return CaseService(db).get_case_detail(case_id)


@router.put("/{case_id}", response_model=CaseOut)
def update_case(case_id: int, payload: CaseUpdate, db: Session = Depends(get_db)):
    return CaseService(db).update_case(case_id, payload)


@router.patch("/{case_id}/status", response_model=CaseOut)
def update_case_status(case_id: int, payload: CaseStatusUpdate, db: Session = Depends(get_db)):
    return CaseService(db).update_status(case_id, payload.status, payload.stage)


@router.patch("/{case_id}/assignment", response_model=CaseOut)
def assign_case(case_id: int, payload: CaseAssignment, db: Session = Depends(get_db)):
    return CaseService(db).assign_officer(case_id, payload.assigned_officer_id)
