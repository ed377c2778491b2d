import io

import pytest

from distress.core.errors import (
    NotFound,
    PayloadTooLarge,
    StoreError,
    UnsupportedMediaType,
    ValidationError,
)
from distress.models.document import Document
from distress.services.document_service import DocumentService, storage_key_for

PDF_BYTES = b"%PDF-1.4\n" + b"0" * 1015


def upload(svc, case_id, data=PDF_BYTES, filename="report.pdf", content_type="application/pdf", size=None):
    return svc.upload_document(case_id, io.BytesIO(data), filename, content_type, size)


def test_storage_key_is_unique_and_keeps_extension():
    first = storage_key_for(3, "Passport Scan.PNG")
    second = storage_key_for(3, "Passport Scan.PNG")
    assert first != second
    assert first.startswith("case_3_")
    assert first.endswith(".png")


def test_upload_stores_bytes_and_record(db, storage, make_case):
    case = make_case()
    svc = DocumentService(db, storage)

    doc = upload(svc, case.id)

    assert doc.id is not None
    assert doc.case_id == case.id
    assert doc.file_name == "report.pdf"
    assert doc.file_type == "application/pdf"
    assert doc.file_size == len(PDF_BYTES)
    assert doc.uploaded_at is not None
    assert storage.blobs == {doc.file_path: PDF_BYTES}


def test_upload_to_missing_case_raises_not_found(db, storage):
    with pytest.raises(NotFound):
        upload(DocumentService(db, storage), 42)
    assert storage.blobs == {}


def test_upload_rejects_disallowed_content_type(db, storage, make_case):
    case = make_case()
    svc = DocumentService(db, storage)

    with pytest.raises(UnsupportedMediaType, match="text/x-shellscript"):
        upload(svc, case.id, data=b"#!/bin/sh\nrm -rf /\n", filename="run.sh", content_type="text/x-shellscript")

    assert svc.list_documents(case.id) == []
    assert storage.blobs == {}


@pytest.mark.parametrize("declared", [True, False])
def test_upload_rejects_files_over_ten_mib(db, storage, make_case, declared):
    case = make_case()
    data = b"\0" * (11 * 1024 * 1024)
    svc = DocumentService(db, storage)

    with pytest.raises(PayloadTooLarge):
        upload(svc, case.id, data=data, size=len(data) if declared else None)

    assert svc.list_documents(case.id) == []
    assert storage.blobs == {}


def test_upload_rejects_empty_file(db, storage, make_case):
    case = make_case()
    with pytest.raises(ValidationError, match="Empty file"):
        upload(DocumentService(db, storage), case.id, data=b"")


def test_failed_record_insert_removes_stored_bytes(db, storage, make_case, monkeypatch):
    case = make_case()
    svc = DocumentService(db, storage)
    stored_keys = []
    original_put = storage.put

    def tracking_put(key, data, content_type=None):
        stored_keys.append(key)
        original_put(key, data, content_type)

    def failing_insert(document):
        raise StoreError("Could not save document record: database error")

    monkeypatch.setattr(storage, "put", tracking_put)
    monkeypatch.setattr(svc, "insert_document", failing_insert)

    with pytest.raises(StoreError):
        upload(svc, case.id)

    assert len(stored_keys) == 1
    assert not storage.exists(stored_keys[0])
    assert db.query(Document).count() == 0


def test_list_documents_in_upload_order(db, storage, make_case):
    case = make_case()
    other = make_case(subject="Another case")
    svc = DocumentService(db, storage)
    first = upload(svc, case.id, filename="a.pdf")
    second = upload(svc, case.id, data=b"\x89PNG....", filename="b.png", content_type="image/png")
    upload(svc, other.id, filename="c.pdf")

    assert [d.id for d in svc.list_documents(case.id)] == [first.id, second.id]


def test_list_documents_for_missing_case_raises_not_found(db, storage):
    with pytest.raises(NotFound):
        DocumentService(db, storage).list_documents(9)


def test_delete_document_removes_row_and_bytes(db, storage, make_case):
    case = make_case()
    svc = DocumentService(db, storage)
    doc = upload(svc, case.id)

    svc.delete_document(case.id, doc.id)

    assert svc.list_documents(case.id) == []
    assert storage.blobs == {}


def test_delete_document_succeeds_when_byte_delete_fails(db, storage, make_case, caplog):
    case = make_case()
    svc = DocumentService(db, storage)
    doc = upload(svc, case.id)
    storage.fail_deletes = True

    svc.delete_document(case.id, doc.id)

    assert svc.list_documents(case.id) == []
    assert doc.file_path in storage.blobs
    assert "Error deleting stored file" in caplog.text


def test_delete_document_of_other_case_raises_not_found(db, storage, make_case):
    case = make_case()
    other = make_case(subject="Another case")
    svc = DocumentService(db, storage)
    doc = upload(svc, case.id)

    with pytest.raises(NotFound):
        svc.delete_document(other.id, doc.id)
    with pytest.raises(NotFound):
        svc.delete_document(case.id, doc.id + 100)


def test_download_document_returns_bytes(db, storage, make_case):
    case = make_case()
    svc = DocumentService(db, storage)
    doc = upload(svc, case.id)

    fetched, data = svc.download_document(case.id, doc.id)
    assert fetched.id == doc.id
    assert data == PDF_BYTES

    del storage.blobs[doc.file_path]
    with pytest.raises(NotFound, match="missing"):
        svc.download_document(case.id, doc.id)
