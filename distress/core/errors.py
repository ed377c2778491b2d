# distress/core/errors.py
"""
Domain errors raised by the services.

Every error carries a stable ``kind`` and the HTTP status the API layer
answers with; the exception handler in ``distress.main`` renders them as
``{"error": {"kind": ..., "message": ...}}``.
"""


class CaseManagementError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"kind": self.kind, "message": self.message}


class ValidationError(CaseManagementError):
    kind = "validation_error"
    status_code = 400


class NotFound(CaseManagementError):
    kind = "not_found"
    status_code = 404


class Conflict(CaseManagementError):
    kind = "conflict"
    status_code = 409


class UnsupportedMediaType(CaseManagementError):
    kind = "unsupported_media_type"
    status_code = 415


class PayloadTooLarge(CaseManagementError):
    kind = "payload_too_large"
    status_code = 413


class StoreError(CaseManagementError):
    """Database failure, including lost connectivity."""
    kind = "store_error"
    status_code = 500


class StorageError(CaseManagementError):
    """Byte store failure."""
    kind = "storage_error"
    status_code = 502
