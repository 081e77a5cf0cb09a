import pytest

from upstreamguard.config import AppConfig
from upstreamguard.infra.http_adapter import HttpResponse
from upstreamguard.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _use_test_env(monkeypatch):
    """모든 테스트에서 .env 대신 .env.test를 사용하도록 강제."""
    monkeypatch.setattr(
        AppConfig, "model_config", {**AppConfig.model_config, "env_file": ".env.test"}
    )


@pytest.fixture(autouse=True)
def _reset_logging_state():
    """Reset logging config between tests to avoid idempotent guard interference."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_config() -> AppConfig:
    """테스트용 AppConfig. 실제 .env 파일 불필요."""
    return AppConfig(
        third_party_base_url="https://third-party.example.com",
        third_party_name="third_party_api",
        request_timeout=5.0,
    )


class StubHttp:
    """HttpClientAdapter stub: 고정 응답을 돌려주거나 예외를 던진다."""

    def __init__(self, response: HttpResponse | None = None, error: BaseException | None = None):
        self.response = response
        self.error = error
        self.paths: list[str] = []

    async def get(self, path: str) -> HttpResponse:
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def stub_http():
    return StubHttp
