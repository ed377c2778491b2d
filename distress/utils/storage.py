# distress/utils/storage.py
"""
Byte storage for uploaded case documents.

The services only rely on ``put / get / delete / exists`` keyed by an opaque
string, so a local directory and an S3 bucket are interchangeable.
"""
import logging
import os
from abc import ABC, abstractmethod

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from distress.core.config import settings
from distress.core.errors import StorageError

logger = logging.getLogger(__name__)


class BlobStorage(ABC):
    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str = None) -> None:
        ...

    @abstractmethod
    def get(self, key: str) -> bytes:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        ...


class LocalBlobStorage(BlobStorage):
    """Stores each blob as a file directly under ``root``."""

    def __init__(self, root: str):
        self.root = os.path.realpath(root)
        os.makedirs(self.root, exist_ok=True)

    def _path(self, key: str) -> str:
        path = os.path.realpath(os.path.join(self.root, key))
        if os.path.dirname(path) != self.root:
            raise StorageError(f"Invalid storage key: {key!r}")
        return path

    def put(self, key, data, content_type=None):
        try:
            with open(self._path(key), "wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Failed to store {key}: {e}") from e

    def get(self, key):
        try:
            with open(self._path(key), "rb") as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Failed to read {key}: {e}") from e

    def delete(self, key):
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e

    def exists(self, key):
        return os.path.isfile(self._path(key))


class S3BlobStorage(BlobStorage):
    def __init__(self, bucket: str, endpoint_url: str = None, access_key: str = None, secret_key: str = None):
        if not bucket:
            raise RuntimeError("S3 not configured")
        self.bucket = bucket
        self.client = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
        )

    def put(self, key, data, content_type=None):
        extra_args = {}
        if content_type:
            extra_args["ContentType"] = content_type
        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=data, **extra_args)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to upload {key} to S3: {e}") from e

    def get(self, key):
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
            return response["Body"].read()
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to download {key} from S3: {e}") from e

    def delete(self, key):
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to delete {key} from S3: {e}") from e

    def exists(self, key):
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError(f"Failed to stat {key} on S3: {e}") from e


def build_storage() -> BlobStorage:
    if settings.STORAGE_BACKEND == "s3":
        logger.info("Using S3 document storage (bucket=%s)", settings.S3_BUCKET)
        return S3BlobStorage(
            settings.S3_BUCKET,
            endpoint_url=settings.S3_ENDPOINT,
            access_key=settings.S3_ACCESS_KEY,
            secret_key=settings.S3_SECRET_KEY,
        )
    logger.info("Using local document storage at %s", settings.UPLOAD_DIR)
    return LocalBlobStorage(settings.UPLOAD_DIR)
