"""UpstreamClient (call orchestrator) 테스트."""

import asyncio
import socket

import pytest

from upstreamguard.exceptions import UpstreamBadGatewayError, UpstreamTimeoutError
from upstreamguard.interceptor import (
    PassThroughInterceptor,
    UpstreamCall,
    UpstreamClient,
    UpstreamErrorInterceptor,
)


class CapturingInterceptor:
    """전달받은 call을 기록한다."""

    def __init__(self):
        self.calls: list[UpstreamCall] = []

    async def intercept(self, call):
        self.calls.append(call)
        return await call.invoke()


class TestDelegation:
    @pytest.mark.asyncio
    async def test_call_builds_descriptor_and_delegates(self):
        interceptor = CapturingInterceptor()
        client = UpstreamClient(interceptor)

        async def work():
            return "value"

        result = await client.call("svc", "op", "k=v", work)

        assert result == "value"
        assert len(interceptor.calls) == 1
        call = interceptor.calls[0]
        assert (call.upstream, call.operation, call.context) == ("svc", "op", "k=v")
        assert call.work is work

    @pytest.mark.asyncio
    async def test_execute_passes_prebuilt_descriptor(self):
        interceptor = CapturingInterceptor()
        client = UpstreamClient(interceptor)
        call = UpstreamCall("svc", "op", "", lambda: 7)

        assert await client.execute(call) == 7
        assert interceptor.calls == [call]

    def test_exposes_interceptor(self):
        interceptor = PassThroughInterceptor()
        assert UpstreamClient(interceptor).interceptor is interceptor

    def test_with_error_classification(self):
        client = UpstreamClient.with_error_classification()
        assert isinstance(client.interceptor, UpstreamErrorInterceptor)


class TestClassificationThroughClient:
    @pytest.mark.asyncio
    async def test_success_value_unchanged(self):
        value = {"id": "123", "name": "ok"}
        client = UpstreamClient.with_error_classification()
        assert await client.call("svc", "op", "", lambda: value) is value

    @pytest.mark.asyncio
    async def test_baseline_contrast(self):
        """분류기를 빼면 raw 예외, 넣으면 taxonomy 예외."""

        async def work():
            raise socket.timeout("Simulated timeout")

        with pytest.raises(socket.timeout):
            await UpstreamClient(PassThroughInterceptor()).call("svc", "op", "", work)
        with pytest.raises(UpstreamTimeoutError):
            await UpstreamClient.with_error_classification().call("svc", "op", "", work)


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self):
        """같은 client로 동시에 호출해도 결과가 섞이지 않는다."""
        client = UpstreamClient.with_error_classification()

        async def ok(i):
            await asyncio.sleep(0.001 * (5 - i))
            return i

        async def fail():
            await asyncio.sleep(0.001)
            raise RuntimeError("boom")

        results = await asyncio.gather(
            *(client.call("svc", f"op{i}", f"i={i}", lambda i=i: ok(i)) for i in range(5)),
            client.call("svc", "failing", "", fail),
            return_exceptions=True,
        )

        assert results[:5] == [0, 1, 2, 3, 4]
        assert isinstance(results[5], UpstreamBadGatewayError)
        assert "failing" in str(results[5])
