# distress/models/case.py
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from distress.db.base import Base
from distress.db.session import utcnow


class CaseStatus(str, enum.Enum):
    PENDING = "Pending"
    UNDER_REVIEW = "Under Review"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class CaseStage(str, enum.Enum):
    FRONT_OFFICE_RECEIPT = "Front Office Receipt"
    DIRECTOR_REVIEW = "Director Review"
    CASE_INVESTIGATION = "Case Investigation"
    CADET_ASSIGNMENT = "Cadet Assignment"


class Case(Base):
    __tablename__ = "cases"
    id = Column(Integer, primary_key=True, index=True)
    reference_number = Column(String(50), unique=True, nullable=False, index=True)
    sender_name = Column(String(255), nullable=False)
    receiving_date = Column(DateTime, nullable=False, default=utcnow)
    subject = Column(String(255), nullable=False)
    country_of_origin = Column(String(100), nullable=False, index=True)
    distressed_person_name = Column(String(255), nullable=False)
    nature_of_case = Column(String(100), nullable=False, index=True)
    case_details = Column(Text, nullable=False, default="")

    # stored as plain labels, validated against CaseStatus / CaseStage in the services
    status = Column(String(50), nullable=False, default=CaseStatus.PENDING.value, index=True)
    stage = Column(String(100), nullable=False)
    assigned_officer_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    documents = relationship("Document", back_populates="case", order_by="Document.id")
    progress_notes = relationship(
        "ProgressNote",
        back_populates="case",
        order_by="[ProgressNote.created_at.desc(), ProgressNote.id.desc()]",
    )
