# distress/services/document_service.py
import logging
import os
import uuid
from typing import BinaryIO, List, Optional, Tuple

from sqlalchemy.orm import Session

from distress.core.config import settings
from distress.core.errors import (
    CaseManagementError,
    NotFound,
    PayloadTooLarge,
    UnsupportedMediaType,
    ValidationError,
)
from distress.db.session import atomic, utcnow
from distress.models.case import Case
from distress.models.document import Document
from distress.utils.storage import BlobStorage

logger = logging.getLogger(__name__)


def storage_key_for(case_id: int, filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    return f"case_{case_id}_{uuid.uuid4().hex}{ext}"


class DocumentService:
    def __init__(self, db: Session, storage: BlobStorage):
        self.db = db
        self.storage = storage

    def _require_case(self, case_id: int):
        if not self.db.query(Case.id).filter(Case.id == case_id).first():
            raise NotFound(f"Case {case_id} not found")

    def _read_limited(self, stream: BinaryIO, max_size: int) -> bytes:
        # one byte past the ceiling is enough to know it is too large
        data = stream.read(max_size + 1)
        if len(data) > max_size:
            raise PayloadTooLarge(f"File too large (max {max_size // (1024 * 1024)}MB)")
        return data

    # -------------------
    # Document store
    # -------------------
    def list_documents(self, case_id: int) -> List[Document]:
        self._require_case(case_id)
        return (
            self.db.query(Document)
            .filter(Document.case_id == case_id)
            .order_by(Document.id.asc())
            .all()
        )

    def get_document(self, case_id: int, document_id: int) -> Document:
        doc = (
            self.db.query(Document)
            .filter(Document.id == document_id, Document.case_id == case_id)
            .first()
        )
        if not doc:
            raise NotFound(f"Document {document_id} not found for case {case_id}")
        return doc

    def insert_document(self, document: Document) -> Document:
        document.uploaded_at = utcnow()
        with atomic(self.db, "save document record"):
            self.db.add(document)
        return document

    # -------------------
    # Ingestion
    # -------------------
    def upload_document(
        self,
        case_id: int,
        stream: BinaryIO,
        filename: str,
        content_type: str,
        size: Optional[int] = None,
    ) -> Document:
        self._require_case(case_id)

        max_size = settings.MAX_UPLOAD_SIZE_BYTES
        if size is not None and size > max_size:
            raise PayloadTooLarge(f"File too large (max {max_size // (1024 * 1024)}MB)")
        if content_type not in settings.ALLOWED_UPLOAD_TYPES:
            raise UnsupportedMediaType(f"Unsupported file type: {content_type}")

        data = self._read_limited(stream, max_size)
        if not data:
            raise ValidationError("Empty file")

        key = storage_key_for(case_id, filename)
        self.storage.put(key, data, content_type=content_type)

        document = Document(
            case_id=case_id,
            file_name=filename,
            file_path=key,
            file_type=content_type,
            file_size=len(data),
        )
        try:
            self.insert_document(document)
        except CaseManagementError:
            # no transaction spans the byte store: undo the blob by hand
            logger.warning("Document record insert failed, removing stored blob %s", key)
            try:
                self.storage.delete(key)
            except CaseManagementError:
                logger.exception("Could not remove orphaned blob %s", key)
            raise

        logger.info(
            "Stored document %s for case %s (%s, %d bytes)",
            document.id, case_id, content_type, document.file_size,
        )
        return document

    def download_document(self, case_id: int, document_id: int) -> Tuple[Document, bytes]:
        doc = self.get_document(case_id, document_id)
        if not self.storage.exists(doc.file_path):
            raise NotFound("File missing from storage")
        return doc, self.storage.get(doc.file_path)

    def delete_document(self, case_id: int, document_id: int) -> Document:
        doc = self.get_document(case_id, document_id)
        with atomic(self.db, "delete document"):
            self.db.delete(doc)

        # the record is authoritative; leftover bytes are only logged
        try:
            self.storage.delete(doc.file_path)
        except CaseManagementError as e:
            logger.warning("Error deleting stored file %s: %s", doc.file_path, e.message)
        logger.info("Deleted document %s from case %s", document_id, case_id)
        return doc
