"""FastAPI 의존성 주입."""

from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends

from upstreamguard.config import AppConfig
from upstreamguard.infra.http_adapter import HttpClientAdapter, HttpxClientAdapter
from upstreamguard.interceptor.client import UpstreamClient
from upstreamguard.services.third_party import ThirdPartyClient


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_upstream_client() -> UpstreamClient:
    return UpstreamClient.with_error_classification()


async def get_http_adapter(
    config: AppConfig = Depends(get_config),
) -> AsyncIterator[HttpClientAdapter]:
    """요청 단위 httpx adapter. 응답 후 닫는다."""
    adapter = HttpxClientAdapter(config.third_party_base_url, timeout=config.request_timeout)
    try:
        yield adapter
    finally:
        await adapter.aclose()


def get_third_party_client(
    config: AppConfig = Depends(get_config),
    http: HttpClientAdapter = Depends(get_http_adapter),
    upstream_client: UpstreamClient = Depends(get_upstream_client),
) -> ThirdPartyClient:
    return ThirdPartyClient(http, upstream_client, upstream=config.third_party_name)
