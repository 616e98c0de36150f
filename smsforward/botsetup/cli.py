"""Click CLI for configuring the forwarding bot through the Telegram Bot API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import click
import httpx

from smsforward.botsetup.client import (
    DEFAULT_TIMEOUT_SECONDS,
    TELEGRAM_API_URL,
    HttpClient,
    HttpxClient,
    IndentJsonFormatter,
    JsonFormatter,
)
from smsforward.botsetup.configurator import (
    ApiResult,
    MalformedResponseError,
    set_commands,
    set_webhook,
)


def _api_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "-v", "--verbose", is_flag=True, help="Log request details to stderr.",
    )(func)
    func = click.option(
        "--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS, show_default=True,
        help="HTTP timeout in seconds.",
    )(func)
    func = click.option(
        "--api-url", default=TELEGRAM_API_URL, show_default=True, help="Bot API base URL.",
    )(func)
    return func


def _collaborators(
    ctx: click.Context, timeout: float, verbose: bool,
) -> tuple[HttpClient, JsonFormatter]:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        # httpx logs full request URLs, which carry the bot token.
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
    obj = ctx.find_root().obj or {}
    client: HttpClient = obj.get("client") or HttpxClient(timeout=timeout)
    formatter: JsonFormatter = obj.get("formatter") or IndentJsonFormatter()
    return client, formatter


def _run(ctx: click.Context, call: Callable[[], ApiResult]) -> None:
    try:
        result = call()
    except httpx.HTTPError as exc:
        raise click.ClickException(f"request failed: {exc}") from exc
    except MalformedResponseError as exc:
        click.echo(exc.body)
        raise click.ClickException(str(exc)) from exc
    click.echo(result.output)
    if not result.ok:
        ctx.exit(1)


@click.group()
def cli() -> None:
    """Telegram bot setup commands."""


@cli.command("set-webhook")
@click.argument("bot_token")
@click.argument("secret_token")
@_api_options
@click.pass_context
def set_webhook_command(
    ctx: click.Context,
    bot_token: str,
    secret_token: str,
    api_url: str,
    timeout: float,
    verbose: bool,
) -> None:
    """Point the bot's webhook at the forwarder with SECRET_TOKEN."""
    client, formatter = _collaborators(ctx, timeout, verbose)
    _run(ctx, lambda: set_webhook(bot_token, secret_token, client, formatter, api_url=api_url))


@cli.command("set-commands")
@click.argument("bot_token")
@_api_options
@click.pass_context
def set_commands_command(
    ctx: click.Context, bot_token: str, api_url: str, timeout: float, verbose: bool,
) -> None:
    """Register the bot's /info and /version command menu."""
    client, formatter = _collaborators(ctx, timeout, verbose)
    _run(ctx, lambda: set_commands(bot_token, client, formatter, api_url=api_url))
