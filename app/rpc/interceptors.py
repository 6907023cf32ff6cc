"""
gRPC server interceptors.

RequestIdInterceptor tags each call with an id (taken from the caller's
x-request-id metadata or generated) and echoes it back as initial metadata.

ErrorEnvelopeInterceptor is the single place where exceptions become RPC
statuses: AppError keeps its message and maps its HTTP-like code to a gRPC
code, anything else is logged and reported as a generic internal error.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

import grpc
from fastapi import status

from app.exceptions import AppError
from app.log import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"
ERROR_CODE_HEADER = "x-error-code"

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

_GRPC_STATUS_BY_HTTP: dict[int, grpc.StatusCode] = {
    status.HTTP_400_BAD_REQUEST: grpc.StatusCode.INVALID_ARGUMENT,
    status.HTTP_401_UNAUTHORIZED: grpc.StatusCode.UNAUTHENTICATED,
    status.HTTP_403_FORBIDDEN: grpc.StatusCode.PERMISSION_DENIED,
    status.HTTP_404_NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    status.HTTP_409_CONFLICT: grpc.StatusCode.ALREADY_EXISTS,
    413: grpc.StatusCode.RESOURCE_EXHAUSTED,  # content too large
    status.HTTP_429_TOO_MANY_REQUESTS: grpc.StatusCode.RESOURCE_EXHAUSTED,
    status.HTTP_500_INTERNAL_SERVER_ERROR: grpc.StatusCode.INTERNAL,
    status.HTTP_501_NOT_IMPLEMENTED: grpc.StatusCode.UNIMPLEMENTED,
    status.HTTP_502_BAD_GATEWAY: grpc.StatusCode.UNAVAILABLE,
    status.HTTP_503_SERVICE_UNAVAILABLE: grpc.StatusCode.UNAVAILABLE,
    status.HTTP_504_GATEWAY_TIMEOUT: grpc.StatusCode.DEADLINE_EXCEEDED,
}

UnaryBehavior = Callable[[Any, grpc.aio.ServicerContext], Awaitable[Any]]


def grpc_status_for(status_code: int) -> grpc.StatusCode:
    if status_code in _GRPC_STATUS_BY_HTTP:
        return _GRPC_STATUS_BY_HTTP[status_code]
    if 400 <= status_code < 500:
        return grpc.StatusCode.FAILED_PRECONDITION
    return grpc.StatusCode.UNKNOWN


def _wrap_unary(
    handler: grpc.RpcMethodHandler,
    wrap: Callable[[UnaryBehavior], UnaryBehavior],
) -> grpc.RpcMethodHandler:
    return grpc.unary_unary_rpc_method_handler(
        wrap(handler.unary_unary),
        request_deserializer=handler.request_deserializer,
        response_serializer=handler.response_serializer,
    )


def _metadata_value(metadata: Any, key: str) -> str | None:
    for item_key, value in metadata or ():
        if item_key.lower() == key:
            return value if isinstance(value, str) else value.decode()
    return None


class RequestIdInterceptor(grpc.aio.ServerInterceptor):
    async def intercept_service(self, continuation, handler_call_details):
        handler = await continuation(handler_call_details)
        if handler is None or handler.unary_unary is None:
            return handler

        method = handler_call_details.method
        request_id = (
            _metadata_value(handler_call_details.invocation_metadata, REQUEST_ID_HEADER)
            or str(uuid.uuid4())
        )

        def wrap(behavior: UnaryBehavior) -> UnaryBehavior:
            async def with_request_id(request, context):
                token = request_id_var.set(request_id)
                try:
                    await context.send_initial_metadata(((REQUEST_ID_HEADER, request_id),))
                    logger.debug("RPC %s started", method)
                    return await behavior(request, context)
                finally:
                    request_id_var.reset(token)

            return with_request_id

        return _wrap_unary(handler, wrap)


class ErrorEnvelopeInterceptor(grpc.aio.ServerInterceptor):
    async def intercept_service(self, continuation, handler_call_details):
        handler = await continuation(handler_call_details)
        if handler is None or handler.unary_unary is None:
            return handler

        method = handler_call_details.method

        def wrap(behavior: UnaryBehavior) -> UnaryBehavior:
            async def with_error_envelope(request, context):
                try:
                    return await behavior(request, context)
                except grpc.aio.AbortError:
                    raise
                except AppError as exc:
                    logger.warning("RPC %s failed: %s %s", method, exc.status_code, exc.message)
                    await context.abort(
                        grpc_status_for(exc.status_code),
                        exc.message,
                        trailing_metadata=(
                            (ERROR_CODE_HEADER, str(exc.status_code)),
                            (REQUEST_ID_HEADER, request_id_var.get()),
                        ),
                    )
                except Exception:
                    logger.exception("Unhandled exception in %s", method)
                    await context.abort(
                        grpc.StatusCode.INTERNAL,
                        UNEXPECTED_ERROR_MESSAGE,
                        trailing_metadata=(
                            (ERROR_CODE_HEADER, str(status.HTTP_500_INTERNAL_SERVER_ERROR)),
                            (REQUEST_ID_HEADER, request_id_var.get()),
                        ),
                    )

            return with_error_envelope

        return _wrap_unary(handler, wrap)
