"""Webhook and command-menu configuration via the Telegram Bot API.

Each operation is a single request/response cycle: build the payload,
POST it through the injected HttpClient, format the response body.
Nothing is validated or retried locally; errors from the client or the
formatter propagate to the caller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from pydantic import BaseModel

from smsforward.botsetup.client import (
    TELEGRAM_API_URL,
    HttpClient,
    JsonFormatter,
    bot_api_url,
)
from smsforward.models import WebhookConfig, default_command_menu

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class MalformedResponseError(ValueError):
    """The API answered with a body that is not valid JSON."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"response is not valid JSON (HTTP {status_code})")
        self.status_code = status_code
        self.body = body


@dataclass
class ApiResult:
    status_code: int
    body: str
    output: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def set_webhook(
    bot_token: str,
    secret_token: str,
    client: HttpClient,
    formatter: JsonFormatter,
    api_url: str = TELEGRAM_API_URL,
) -> ApiResult:
    """Point the bot's webhook at the forwarder, guarded by secret_token."""
    config = WebhookConfig(secret_token=secret_token)
    return _call(bot_token, "setWebhook", config, client, formatter, api_url)


def set_commands(
    bot_token: str,
    client: HttpClient,
    formatter: JsonFormatter,
    api_url: str = TELEGRAM_API_URL,
) -> ApiResult:
    """Register the bot's slash-command menu."""
    return _call(bot_token, "setMyCommands", default_command_menu(), client, formatter, api_url)


def _call(
    bot_token: str,
    method: str,
    payload: BaseModel,
    client: HttpClient,
    formatter: JsonFormatter,
    api_url: str,
) -> ApiResult:
    url = bot_api_url(bot_token, method, api_url)
    logger.info("Calling %s", method)
    status_code, body = client.post_json(url, dict(JSON_HEADERS), payload.model_dump_json())
    if not 200 <= status_code < 300:
        logger.warning("%s returned HTTP %d", method, status_code)
    try:
        output = formatter.pretty(body)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(status_code, body) from exc
    return ApiResult(status_code=status_code, body=body, output=output)
