"""Interceptor Protocol and the baseline implementations."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from upstreamguard.interceptor.call import UpstreamCall

T = TypeVar("T")


@runtime_checkable
class UpstreamInterceptor(Protocol):
    """Given a call descriptor, produce its result or fail.

    Implementations must not invoke ``call.work`` more than once and must
    not suppress failures.
    """

    async def intercept(self, call: UpstreamCall[T]) -> T: ...


class PassThroughInterceptor:
    """No normalization, just run the work. Raw failures leak to the caller."""

    async def intercept(self, call: UpstreamCall[T]) -> T:
        return await call.invoke()


class ChainedInterceptor:
    """Ordered composition of interceptors, fixed at construction.

    The first interceptor is the outermost one. Each layer receives a copy of
    the call whose work runs the rest of the chain, so the real work still
    executes exactly once, inside the innermost layer.
    """

    def __init__(self, *interceptors: UpstreamInterceptor) -> None:
        if not interceptors:
            raise ValueError("ChainedInterceptor requires at least one interceptor")
        self._interceptors = tuple(interceptors)

    @property
    def interceptors(self) -> tuple[UpstreamInterceptor, ...]:
        return self._interceptors

    async def intercept(self, call: UpstreamCall[T]) -> T:
        return await self._intercept_at(0, call)

    async def _intercept_at(self, index: int, call: UpstreamCall[T]) -> T:
        interceptor = self._interceptors[index]
        if index == len(self._interceptors) - 1:
            return await interceptor.intercept(call)

        async def rest() -> T:
            return await self._intercept_at(index + 1, call)

        return await interceptor.intercept(call.with_work(rest))
