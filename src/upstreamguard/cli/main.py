"""upstream-guard CLI (Typer 기반)."""

import asyncio
import json
import logging
from dataclasses import asdict

import typer

from upstreamguard.config import AppConfig
from upstreamguard.exceptions import UpstreamGuardError
from upstreamguard.infra.http_adapter import HttpxClientAdapter
from upstreamguard.interceptor.client import UpstreamClient
from upstreamguard.logging_config import setup_logging
from upstreamguard.services.third_party import ExternalResource, ThirdPartyClient

app = typer.Typer(help="Classify upstream call failures at the call boundary")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
) -> None:
    """Classify upstream call failures at the call boundary."""
    level = logging.DEBUG if verbose else _get_config().log_level_value
    setup_logging(level)


def _get_config() -> AppConfig:
    return AppConfig()


def _handle_error(e: UpstreamGuardError) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


async def _fetch(config: AppConfig, resource_id: str) -> ExternalResource:
    async with HttpxClientAdapter(
        config.third_party_base_url, timeout=config.request_timeout
    ) as http:
        client = ThirdPartyClient(
            http,
            UpstreamClient.with_error_classification(),
            upstream=config.third_party_name,
        )
        return await client.fetch_resource(resource_id)


@app.command()
def fetch(
    resource_id: str = typer.Argument(..., help="Resource id to fetch"),
    base_url: str = typer.Option(None, "--base-url", help="Override third-party base URL"),
    timeout: float = typer.Option(None, "--timeout", help="Request timeout in seconds"),
) -> None:
    """Third-party 리소스 하나를 조회해 JSON으로 출력."""
    config = _get_config()
    overrides = {}
    if base_url is not None:
        overrides["third_party_base_url"] = base_url
    if timeout is not None:
        overrides["request_timeout"] = timeout
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        resource = asyncio.run(_fetch(config, resource_id))
    except UpstreamGuardError as e:
        _handle_error(e)
        return

    typer.echo(json.dumps(asdict(resource), ensure_ascii=False))


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind host"),
    port: int = typer.Option(None, "--port", help="Bind port"),
) -> None:
    """API 서버 실행 (uvicorn)."""
    import uvicorn

    config = _get_config()
    uvicorn.run(
        "upstreamguard.api.app:app",
        host=host or config.host,
        port=port or config.port,
    )
