#!/usr/bin/env python3
"""Validate configuration: config loading and third-party upstream reachability."""

import asyncio
import functools
import sys


def check_config():
    """1단계: .env 로드 및 설정값 검증."""
    print("[1/2] Loading config from .env ...")
    try:
        from upstreamguard.config import AppConfig

        config = AppConfig()
        print(f"  THIRD_PARTY_BASE_URL = {config.third_party_base_url}")
        print(f"  THIRD_PARTY_NAME     = {config.third_party_name}")
        print(f"  REQUEST_TIMEOUT      = {config.request_timeout}")
        print("  => OK")
        return config
    except Exception as e:
        print(f"  => FAIL: {e}")
        return None


async def _probe(config) -> int:
    from upstreamguard.infra.http_adapter import HttpxClientAdapter
    from upstreamguard.interceptor.client import UpstreamClient

    async with HttpxClientAdapter(
        config.third_party_base_url, timeout=config.request_timeout
    ) as http:
        response = await UpstreamClient.with_error_classification().call(
            upstream=config.third_party_name,
            operation="probe",
            context=f"base_url={config.third_party_base_url}",
            work=functools.partial(http.get, "/"),
        )
    return response.status


def check_upstream(config):
    """2단계: upstream 연결 확인. 실패는 taxonomy 메시지로 보고한다."""
    from upstreamguard.exceptions import UpstreamError

    print("\n[2/2] Testing upstream connection ...")
    try:
        status = asyncio.run(_probe(config))
        print(f"  HTTP status: {status}")
        print("  => OK")
        return True
    except UpstreamError as e:
        print(f"  => FAIL ({e.error}): {e}")
        return False


def main():
    config = check_config()
    if config is None:
        print("\nResult: config loading failed. Check your .env.")
        sys.exit(1)

    upstream_ok = check_upstream(config)

    print("\n" + "=" * 40)
    print("  Config   : OK")
    print(f"  Upstream : {'OK' if upstream_ok else 'FAIL'}")
    print("=" * 40)

    if upstream_ok:
        print("All checks passed!")
    else:
        print("Some checks failed. Review the errors above.")
        sys.exit(1)


if __name__ == "__main__":
    main()
