"""Upstream 호출 하나를 기술하는 불변 descriptor."""

from __future__ import annotations

import asyncio
import dataclasses
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class UpstreamCall(Generic[T]):
    """Upstream, operation, 진단용 context, 그리고 지연 실행되는 work.

    생성만으로는 work가 실행되지 않는다.
    """

    upstream: str
    operation: str
    context: str
    work: Callable[[], Awaitable[T] | T]

    def __post_init__(self) -> None:
        if not self.upstream or not self.upstream.strip():
            raise ValueError("upstream must be a non-empty string")
        if not self.operation or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

    async def invoke(self) -> T:
        """work를 한 번 실행한다.

        coroutine function은 그대로 await 하고, 일반 callable은 기본 executor
        스레드에서 실행해 event loop를 막지 않는다. 결과가 awaitable이면 await 한다.
        """
        if inspect.iscoroutinefunction(self.work):
            return await self.work()
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, self.work)
        if inspect.isawaitable(result):
            return await result
        return result

    def with_work(self, work: Callable[[], Awaitable[T] | T]) -> UpstreamCall[T]:
        """work만 교체한 복사본. 원본은 그대로 둔다."""
        return dataclasses.replace(self, work=work)
