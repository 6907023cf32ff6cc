"""
Media — gRPC controller layer.

Receives decoded request messages, calls the service, composes the response
message. Errors propagate untouched to the ErrorEnvelopeInterceptor.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.media.schemas import UploadAvatarRequest
from app.protos import media_pb2, media_pb2_grpc

if TYPE_CHECKING:
    import grpc

    from app.media.service import MediaService

logger = logging.getLogger(__name__)


class MediaController(media_pb2_grpc.MediaServiceServicer):
    def __init__(self, media_service: MediaService) -> None:
        self._media_service = media_service

    async def GetImageUrl(self, request, context: grpc.aio.ServicerContext):
        logger.info("Getting image URL for fileKey: %s", request.file_key)
        file_url = await self._media_service.get_image_url(request.file_key)
        return media_pb2.FileUrl(file_url=file_url)

    async def UploadAvatar(self, request, context: grpc.aio.ServicerContext):
        logger.info(
            "Uploading avatar for user ID: %s (%s, %s, %d bytes)",
            request.id, request.original_name, request.mime_type, request.size,
        )
        file_url = await self._media_service.upload_avatar(
            UploadAvatarRequest.from_message(request)
        )
        return media_pb2.FileUrl(file_url=file_url)

    async def DeleteAvatar(self, request, context: grpc.aio.ServicerContext):
        logger.info("Deleting avatar with fileKey: %s", request.file_key)
        result = await self._media_service.delete_image(request.file_key)
        return media_pb2.StatusResponse(success=result.success, message=result.message)
