import pytest
from pydantic import ValidationError

from app.config import Settings

_ENV = {
    "ENV_NAME": "production",
    "TRANSPORT_URL": "0.0.0.0:50051",
    "HTTP_PORT": "8005",
    "AWS_ACCESS_KEY_ID": "AKIA",
    "AWS_SECRET_ACCESS_KEY": "secret",
    "AWS_REGION": "eu-west-1",
    "S3_BUCKET_NAME": "avatars",
}


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    for key, value in _ENV.items():
        monkeypatch.setenv(key, value)
    return dict(_ENV)


def test_settings_read_from_environment(env) -> None:
    settings = Settings(_env_file=None)
    assert settings.env_name == "production"
    assert settings.transport_url == "0.0.0.0:50051"
    assert settings.http_port == 8005
    assert settings.aws_region == "eu-west-1"
    assert settings.s3_bucket_name == "avatars"
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("missing", sorted(_ENV))
def test_missing_required_setting_fails(env, monkeypatch: pytest.MonkeyPatch, missing: str) -> None:
    monkeypatch.delenv(missing)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_empty_bucket_name_fails(env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("S3_BUCKET_NAME", "")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("port", ["0", "-1", "not-a-port"])
def test_http_port_must_be_positive_number(env, monkeypatch: pytest.MonkeyPatch, port: str) -> None:
    monkeypatch.setenv("HTTP_PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
