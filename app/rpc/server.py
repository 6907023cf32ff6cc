"""
Builds the grpc.aio server with both RPC surfaces bound.
"""
from __future__ import annotations

import logging

import grpc

from app.constants import MAX_MESSAGE_BYTES
from app.health.controller import HealthCheckController
from app.media.controller import MediaController
from app.media.service import MediaService
from app.protos import health_check_pb2_grpc, media_pb2_grpc
from app.rpc.interceptors import ErrorEnvelopeInterceptor, RequestIdInterceptor

logger = logging.getLogger(__name__)

_SERVER_OPTIONS = [
    ("grpc.max_receive_message_length", MAX_MESSAGE_BYTES),
    ("grpc.max_send_message_length", MAX_MESSAGE_BYTES),
]


def create_grpc_server(address: str, media_service: MediaService) -> tuple[grpc.aio.Server, int]:
    """Return (server, bound_port). The server is not started."""
    server = grpc.aio.server(
        # Outermost first: the request id must be set before errors are enveloped
        interceptors=[RequestIdInterceptor(), ErrorEnvelopeInterceptor()],
        options=_SERVER_OPTIONS,
    )
    health_check_pb2_grpc.add_HealthCheckServiceServicer_to_server(HealthCheckController(), server)
    media_pb2_grpc.add_MediaServiceServicer_to_server(MediaController(media_service), server)

    port = server.add_insecure_port(address)
    logger.info("gRPC server bound to %s (port %d)", address, port)
    return server, port
