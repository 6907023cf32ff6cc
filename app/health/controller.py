"""
Health check — gRPC liveness check.

Static payload, no dependency probing.
"""
from __future__ import annotations

import logging

from app.constants import HEALTHY_MESSAGE
from app.protos import health_check_pb2, health_check_pb2_grpc

logger = logging.getLogger(__name__)


class HealthCheckController(health_check_pb2_grpc.HealthCheckServiceServicer):
    async def CheckAppHealth(self, request=None, context=None):
        logger.info("Health check requested")
        return health_check_pb2.HealthCheckResponse(serving=True, message=HEALTHY_MESSAGE)
