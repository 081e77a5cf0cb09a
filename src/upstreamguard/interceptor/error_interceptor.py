"""Upstream 실패를 UpstreamTimeoutError / UpstreamBadGatewayError로 분류하는 interceptor."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx

from upstreamguard.exceptions import UpstreamBadGatewayError, UpstreamError, UpstreamTimeoutError
from upstreamguard.interceptor.call import UpstreamCall

T = TypeVar("T")

# (exception type, variant label), 앞에서부터 먼저 매칭
TIMEOUT_VARIANTS: tuple[tuple[type[BaseException], str], ...] = (
    (httpx.TimeoutException, "SocketTimeout"),
    (TimeoutError, "Timeout"),
)


def timeout_variant(exc: BaseException) -> str | None:
    """Timeout 계열 예외면 variant 이름, 아니면 None.

    builtin TimeoutError는 socket.timeout, asyncio.TimeoutError를 포함한다.
    """
    for exc_type, variant in TIMEOUT_VARIANTS:
        if isinstance(exc, exc_type):
            return variant
    return None


class UpstreamErrorInterceptor:
    """work를 실행하고 실패를 upstream taxonomy로 정규화한다.

    - 성공: 값을 그대로 반환 (로그 없음)
    - 이미 UpstreamError: 같은 객체를 그대로 re-raise (재포장/재로깅 없음)
    - timeout 계열: UpstreamTimeoutError
    - 그 외 Exception: UpstreamBadGatewayError
    - CancelledError 등 Exception이 아닌 BaseException은 건드리지 않는다.

    분류된 예외의 ``cause``는 항상 원본 예외 객체다.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    async def intercept(self, call: UpstreamCall[T]) -> T:
        try:
            return await call.invoke()
        except UpstreamError:
            raise
        except Exception as e:
            variant = timeout_variant(e)
            if variant is not None:
                raise self._timeout(call, variant, e) from e
            raise self._bad_gateway(call, e) from e

    def _timeout(
        self, call: UpstreamCall, variant: str, original: Exception
    ) -> UpstreamTimeoutError:
        msg = f"[{call.upstream}_timeout] <{call.operation}> {variant} :: {call.context}"
        error = UpstreamTimeoutError(msg, cause=original)
        self._log_failure(original, "%s", msg)
        return error

    def _bad_gateway(self, call: UpstreamCall, original: Exception) -> UpstreamBadGatewayError:
        error = UpstreamBadGatewayError(
            f"Upstream failure for {call.upstream} in {call.operation}", cause=original
        )
        payload = {
            "upstream": call.upstream,
            "operation": call.operation,
            "context": call.context,
            "exception": type(original).__name__,
        }
        self._log_failure(
            original,
            "[%s_error] <%s> Failure payload=%s",
            call.upstream,
            call.operation,
            payload,
        )
        return error

    def _log_failure(self, original: Exception, msg: str, *args) -> None:
        """ERROR 로그. 로거(filter, 주입된 sink)가 실패해도 호출 결과는 바뀌지 않는다."""
        try:
            self._logger.error(msg, *args, exc_info=original)
        except Exception:
            pass
