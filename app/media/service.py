"""
Media — business logic.

Zero gRPC imports. Receives the object store and transcoder via the
constructor; fully testable in isolation.
"""
from __future__ import annotations

import asyncio
import logging

from app.constants import (
    AVATAR_CONTENT_TYPE,
    AVATAR_EXTENSION,
    AVATAR_KEY_PREFIX,
    AVATAR_WIDTH,
    IMAGE_DELETED_MESSAGE,
    SIGNED_URL_EXPIRY_SECONDS,
)
from app.exceptions import (
    AppError,
    AvatarUploadFailed,
    ImageDeleteFailed,
    ImageUrlUnavailable,
    InvalidAvatarOwner,
    InvalidFileKey,
    NoFileBuffer,
)
from app.imaging import AvatarTranscoder
from app.media.schemas import StatusResponse, UploadAvatarRequest
from app.s3 import ObjectStore

logger = logging.getLogger(__name__)


def validate_file_key(file_key: str) -> None:
    if not file_key or not file_key.strip():
        raise InvalidFileKey()


def validate_upload_request(request: UploadAvatarRequest) -> None:
    """Reject an upload before any transcoding or network call."""
    if not request.buffer:
        raise NoFileBuffer()
    if not request.id or not request.field_name:
        raise InvalidAvatarOwner()


def avatar_filename(owner_id: str, field_name: str) -> str:
    return f"{owner_id}-{field_name}.{AVATAR_EXTENSION}"


def avatar_key(filename: str) -> str:
    return f"{AVATAR_KEY_PREFIX}/{filename}"


class MediaService:
    def __init__(
        self,
        store: ObjectStore,
        transcoder: AvatarTranscoder | None = None,
    ) -> None:
        self._store = store
        self._transcoder = transcoder or AvatarTranscoder()

    async def get_image_url(self, file_key: str) -> str:
        validate_file_key(file_key)
        try:
            return await self._store.generate_presigned_get_url(
                file_key, SIGNED_URL_EXPIRY_SECONDS,
            )
        except Exception as exc:
            logger.exception("Presigned GET failed for key %s", file_key)
            raise ImageUrlUnavailable() from exc

    async def upload_avatar(self, request: UploadAvatarRequest) -> str:
        """Transcode the avatar to WebP, store it and return its filename."""
        validate_upload_request(request)

        filename = avatar_filename(request.id, request.field_name)
        try:
            # Pillow is CPU-bound, keep it off the event loop
            loop = asyncio.get_running_loop()
            body = await loop.run_in_executor(
                None, self._transcoder.transcode, request.buffer, AVATAR_WIDTH,
            )
            await self._store.put_object(
                avatar_key(filename), body, AVATAR_CONTENT_TYPE,
            )
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Avatar upload failed for %s", filename)
            raise AvatarUploadFailed() from exc

        logger.info("Stored avatar %s (%d bytes)", filename, len(body))
        return filename

    async def delete_image(self, file_key: str) -> StatusResponse:
        validate_file_key(file_key)
        try:
            await self._store.delete_object(file_key)
        except Exception as exc:
            logger.exception("S3 delete_object failed for key %s", file_key)
            raise ImageDeleteFailed() from exc
        return StatusResponse(success=True, message=IMAGE_DELETED_MESSAGE)
