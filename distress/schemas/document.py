# distress/schemas/document.py
from datetime import datetime

from pydantic import BaseModel


class DocumentOut(BaseModel):
    id: int
    case_id: int
    file_name: str
    file_path: str
    file_type: str
    file_size: int
    uploaded_at: datetime

    class Config:
        from_attributes = True


class MessageOut(BaseModel):
    message: str
