from unittest.mock import AsyncMock

import pytest

from app.config import Settings
from app.s3 import ObjectStore
from tests.factories import SIGNED_URL, make_image_bytes


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env_name="test",
        transport_url="localhost:0",
        http_port=8005,
        aws_access_key_id="test-access-key",
        aws_secret_access_key="test-secret-key",
        aws_region="us-east-1",
        s3_bucket_name="test-bucket",
    )


@pytest.fixture
def store() -> AsyncMock:
    mock = AsyncMock(spec=ObjectStore)
    mock.generate_presigned_get_url.return_value = SIGNED_URL
    return mock


@pytest.fixture
def image_bytes() -> bytes:
    return make_image_bytes()
