"""
AWS S3 object store — the service's only durable storage.

One aioboto3 client is opened at startup and shared by every request; the
bucket is fixed by configuration. Errors from botocore propagate to the
caller, which decides how to classify them.
"""
from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from typing import Any

import aioboto3

from app.config import Settings

logger = logging.getLogger(__name__)


def _s3_session(settings: Settings) -> aioboto3.Session:
    return aioboto3.Session(
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        region_name=settings.aws_region,
    )


class ObjectStore:
    """Bucket-scoped put / presign / delete over a long-lived S3 client."""

    def __init__(self, settings: Settings) -> None:
        self._session = _s3_session(settings)
        self._bucket = settings.s3_bucket_name
        self._exit_stack = AsyncExitStack()
        self._client: Any = None

    @property
    def bucket(self) -> str:
        return self._bucket

    async def connect(self) -> None:
        """Open the S3 client. Called once at process startup."""
        if self._client is not None:
            return
        self._client = await self._exit_stack.enter_async_context(
            self._session.client("s3")
        )
        logger.info("S3 client opened for bucket %s", self._bucket)

    async def close(self) -> None:
        """Close the S3 client. Called at process shutdown."""
        if self._client is None:
            return
        await self._exit_stack.aclose()
        self._client = None
        logger.info("S3 client closed")

    @property
    def client(self) -> Any:
        if self._client is None:
            raise RuntimeError("ObjectStore is not connected")
        return self._client

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        await self.client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    async def generate_presigned_get_url(self, key: str, expiry_seconds: int) -> str:
        """Return a presigned GET URL for direct S3 access."""
        url: str = await self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self._bucket, "Key": key},
            ExpiresIn=expiry_seconds,
        )
        return url

    async def delete_object(self, key: str) -> None:
        """Delete an object. S3 reports success for keys that do not exist."""
        await self.client.delete_object(Bucket=self._bucket, Key=key)
