from pathlib import Path

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_files() -> list[str]:
    """Load .env from the project root, then a local .env."""
    base = Path(__file__).resolve().parent.parent  # project root
    return [str(base / ".env"), ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Runtime ──────────────────────────────────────────────────────────────
    env_name: str = Field(min_length=1)
    log_level: str = "INFO"

    # ── Transport ────────────────────────────────────────────────────────────
    transport_url: str = Field(min_length=1)  # gRPC bind address, host:port
    http_port: PositiveInt  # HTTP liveness endpoint

    # ── AWS ───────────────────────────────────────────────────────────────────
    aws_access_key_id: str = Field(min_length=1)
    aws_secret_access_key: str = Field(min_length=1)
    aws_region: str = Field(min_length=1)
    s3_bucket_name: str = Field(min_length=1)
