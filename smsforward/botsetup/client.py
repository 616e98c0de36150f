"""HTTP and JSON collaborators for the Telegram Bot API setup commands."""

from __future__ import annotations

import json
import logging
from typing import Protocol
from urllib.parse import urlsplit, urlunsplit

import httpx

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT_SECONDS = 10.0


def bot_api_url(bot_token: str, method: str, api_url: str = TELEGRAM_API_URL) -> str:
    """Build a Bot API method URL. The token is embedded as-is."""
    return f"{api_url.rstrip('/')}/bot{bot_token}/{method}"


class HttpClient(Protocol):
    def post_json(self, url: str, headers: dict[str, str], body: str) -> tuple[int, str]:
        """POST a JSON body and return (status_code, response_text)."""
        ...


class JsonFormatter(Protocol):
    def pretty(self, body: str) -> str:
        ...


class HttpxClient:
    """Synchronous httpx-backed HttpClient.

    TLS certificate verification is always enabled. Transport failures
    propagate as httpx.HTTPError.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    def post_json(self, url: str, headers: dict[str, str], body: str) -> tuple[int, str]:
        with httpx.Client(verify=True, timeout=self._timeout) as client:
            resp = client.post(url, headers=headers, content=body.encode())
        logger.debug("POST %s -> %d", _redact(url), resp.status_code)
        return resp.status_code, resp.text


class IndentJsonFormatter:
    """Re-indents a JSON document the way `jq .` prints it."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def pretty(self, body: str) -> str:
        return json.dumps(json.loads(body), indent=self._indent, ensure_ascii=False)


def _redact(url: str) -> str:
    # Bot tokens live in the path as "/bot<token>/<method>"; keep them out of logs.
    parts = urlsplit(url)
    head, _, method = parts.path.rpartition("/")
    prefix, _, segment = head.rpartition("/")
    if not segment.startswith("bot"):
        return url
    return urlunsplit(parts._replace(path=f"{prefix}/bot***/{method}"))
