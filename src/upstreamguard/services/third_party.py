"""Third-party API client. 오류 정규화는 UpstreamClient와 interceptor에 맡긴다."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from upstreamguard.exceptions import UpstreamBadGatewayError
from upstreamguard.infra.http_adapter import HttpClientAdapter
from upstreamguard.interceptor.client import UpstreamClient

logger = logging.getLogger(__name__)

DEFAULT_UPSTREAM = "third_party_api"


@dataclass
class ExternalResource:
    """Third-party API가 돌려주는 리소스."""

    id: str
    name: str


class ThirdPartyClient:
    """외부 provider 호출 + 응답 파싱. transport/framework 관심사는 없다."""

    def __init__(
        self,
        http: HttpClientAdapter,
        upstream_client: UpstreamClient,
        *,
        upstream: str = DEFAULT_UPSTREAM,
    ) -> None:
        self._http = http
        self._upstream_client = upstream_client
        self._upstream = upstream

    async def fetch_resource(self, resource_id: str) -> ExternalResource:
        async def work() -> ExternalResource:
            response = await self._http.get(f"/resources/{resource_id}")
            if response.is_success:
                return parse_resource(response.body)
            logger.error(
                "%s responded with non-2xx status %d for resourceId=%s",
                self._upstream,
                response.status,
                resource_id,
            )
            raise UpstreamBadGatewayError(f"Unexpected upstream status: {response.status}")

        return await self._upstream_client.call(
            upstream=self._upstream,
            operation="fetchResource",
            context=f"resourceId={resource_id}",
            work=work,
        )


def parse_resource(body: str | None) -> ExternalResource:
    """응답 body → ExternalResource. 빈 body는 placeholder, 누락 필드는 "n/a"."""
    if body is None or not body.strip():
        return ExternalResource(id="unknown", name="empty")

    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        data = _parse_lenient(body)
    if not isinstance(data, dict):
        data = {}

    return ExternalResource(
        id=_field(data, "id"),
        name=_field(data, "name"),
    )


def _field(data: dict, key: str) -> str:
    value = data.get(key)
    return "n/a" if value is None else str(value)


def _parse_lenient(body: str) -> dict[str, str]:
    """JSON이 아닌 body: 중괄호/따옴표 제거 후 key:value 쌍만 추린다."""
    content = body.replace("{", "").replace("}", "").replace('"', "")
    pairs: dict[str, str] = {}
    for item in content.split(","):
        parts = [p.strip() for p in item.strip().split(":")]
        if len(parts) == 2:
            pairs[parts[0]] = parts[1]
    return pairs
