"""
Media microservice — process entrypoint.

Runs two listeners in one event loop:
  * the gRPC server (HealthCheckService + MediaService) on TRANSPORT_URL
  * a FastAPI liveness endpoint on HTTP_PORT

The gRPC server and the S3 client live inside the FastAPI lifespan, so
uvicorn's signal handling (SIGINT/SIGTERM) drains both before exit.

Start:  media-service   (or: python -m app.main)
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel

from app.config import Settings
from app.log import configure_logging
from app.media.service import MediaService
from app.rpc.server import create_grpc_server
from app.s3 import ObjectStore

logger = logging.getLogger(__name__)

_SHUTDOWN_GRACE_SECONDS = 5


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

def get_settings() -> Settings:
    return Settings()


def create_http_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        store = ObjectStore(settings)
        grpc_server, port = create_grpc_server(
            settings.transport_url, MediaService(store)
        )
        await store.connect()
        try:
            await grpc_server.start()
            logger.info(
                "Media microservice started (env=%s, grpc=%s, port=%d, http=%d)",
                settings.env_name, settings.transport_url, port, settings.http_port,
            )
            yield
        finally:
            await grpc_server.stop(_SHUTDOWN_GRACE_SECONDS)
            await store.close()
            logger.info("Media microservice stopped")

    app = FastAPI(
        title="Media Microservice",
        version="1.0.0",
        description="Liveness endpoint for the media gRPC service.",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="media")

    return app


async def serve(settings: Settings) -> None:
    http_server = uvicorn.Server(
        uvicorn.Config(
            create_http_app(settings),
            host="0.0.0.0",
            port=settings.http_port,
            lifespan="on",
            log_config=None,  # route uvicorn through the root logger
        )
    )
    await http_server.serve()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
