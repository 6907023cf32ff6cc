"""
Media service — application errors.

Every error a caller may see is an AppError: an HTTP-like status code plus a
human-readable detail. Subclasses preset both so call sites never specify
them. The gRPC ErrorEnvelopeInterceptor turns these into RPC statuses; any
other exception becomes a generic internal error.
"""
from fastapi import HTTPException, status


class AppError(HTTPException):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code=status_code, detail=message)

    @property
    def message(self) -> str:
        return str(self.detail)


class BadRequest(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class InternalError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


# ── Validation ───────────────────────────────────────────────────────────────

class NoFileBuffer(BadRequest):
    def __init__(self) -> None:
        super().__init__("No file buffer provided")


class InvalidFileKey(BadRequest):
    def __init__(self) -> None:
        super().__init__("File key is required")


class InvalidAvatarOwner(BadRequest):
    def __init__(self) -> None:
        super().__init__("Avatar owner id and field name are required")


# ── Storage ──────────────────────────────────────────────────────────────────

class ImageUrlUnavailable(InternalError):
    def __init__(self) -> None:
        super().__init__("Can't get image URL")


class AvatarUploadFailed(InternalError):
    def __init__(self) -> None:
        super().__init__("Can't upload avatar")


class ImageDeleteFailed(InternalError):
    def __init__(self) -> None:
        super().__init__("Can't delete image")
