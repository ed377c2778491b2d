# distress/api/v1/documents.py
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from sqlalchemy.orm import Session

from distress.core.dependencies import get_db, get_storage
from distress.schemas.document import DocumentOut, MessageOut
from distress.services.document_service import DocumentService
from distress.utils.storage import BlobStorage

router = APIRouter()


def content_disposition(filename: str) -> str:
    # header values go out as latin-1: non-ASCII names need the RFC 5987 form
    quoted = quote(filename)
    if quoted != filename:
        return f"inline; filename*=utf-8''{quoted}"
    return f'inline; filename="{filename}"'


@router.post("/{case_id}/documents", response_model=DocumentOut, status_code=201)
async def upload_document(
    case_id: int,
    document: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
):
    svc = DocumentService(db, storage)
    return await run_in_threadpool(
        svc.upload_document,
        case_id,
        document.file,
        document.filename,
        document.content_type,
        document.size,
    )


@router.get("/{case_id}/documents", response_model=List[DocumentOut])
def list_documents(
    case_id: int,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
):
    return DocumentService(db, storage).list_documents(case_id)


@router.get("/{case_id}/documents/{document_id}/download")
def download_document(
    case_id: int,
    document_id: int,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
):
    """
    View / download a stored document
    """
    doc, data = DocumentService(db, storage).download_document(case_id, document_id)
    return Response(
        content=data,
        media_type=doc.file_type,
        headers={"Content-Disposition": content_disposition(doc.file_name)},
    )


@router.delete("/{case_id}/documents/{document_id}", response_model=MessageOut)
def delete_document(
    case_id: int,
    document_id: int,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
):
    DocumentService(db, storage).delete_document(case_id, document_id)
    return {"message": "Document deleted"}
