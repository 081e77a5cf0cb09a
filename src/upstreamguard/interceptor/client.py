"""호출부가 사용하는 단일 진입점. 분류 로직은 interceptor에 위임한다."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from upstreamguard.interceptor.base import UpstreamInterceptor
from upstreamguard.interceptor.call import UpstreamCall
from upstreamguard.interceptor.error_interceptor import UpstreamErrorInterceptor

T = TypeVar("T")


class UpstreamClient:
    """UpstreamCall을 만들어 설정된 interceptor(또는 chain)에 넘긴다.

    호출 간 공유 상태가 없으므로 여러 task에서 동시에 써도 된다.
    """

    def __init__(self, interceptor: UpstreamInterceptor) -> None:
        self._interceptor = interceptor

    @classmethod
    def with_error_classification(cls, logger: logging.Logger | None = None) -> UpstreamClient:
        """UpstreamErrorInterceptor를 장착한 client."""
        return cls(UpstreamErrorInterceptor(logger))

    @property
    def interceptor(self) -> UpstreamInterceptor:
        return self._interceptor

    async def call(
        self,
        upstream: str,
        operation: str,
        context: str,
        work: Callable[[], Awaitable[T] | T],
    ) -> T:
        return await self.execute(UpstreamCall(upstream, operation, context, work))

    async def execute(self, call: UpstreamCall[T]) -> T:
        return await self._interceptor.intercept(call)
