"""Render filtered SMS messages as Telegram HTML."""

from __future__ import annotations

import re

from pydantic import ValidationError

from smsforward.models import AppleMessageFilterQuery

# Keywords that mark a message as carrying a one-time code.
_HAS_CODE = re.compile(
    r"验证码|校验码|交易码|[Cc](?:ODE|ode)|[Vv](?:ERIFY|erify|ERIFICATION|erification)"
)
# 4-8 ASCII digits, optionally prefixed like "G-", not embedded in a longer number.
_CODE = re.compile(r"(?:^|[^0-9])((?:[0-9A-Za-z]-)?[0-9]{4,8})(?:$|[^0-9])")


def has_code(text: str) -> bool:
    return _HAS_CODE.search(text) is not None


def extract_code(text: str) -> str | None:
    """Return the verification code in text, or None if there is none."""
    if not has_code(text):
        return None
    match = _CODE.search(text)
    return match.group(1) if match else None


def escape_html(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def render_message(device: str, body: bytes) -> str:
    """Build the Telegram message text for a forwarded request body.

    Bodies that are not a message filter query are forwarded verbatim
    inside a <pre> block.
    """
    try:
        query = AppleMessageFilterQuery.model_validate_json(body)
    except ValidationError:
        raw = body.decode("utf-8", errors="replace")
        return f"{device}\n\n<pre>{escape_html(raw)}</pre>"

    sender = escape_html(query.sender)
    text = escape_html(query.text)
    code = query.code
    if code is None:
        return f"{device} <code>{sender}</code>\n\n{text}"
    return f"{device} <code>{sender}</code> <b>[<code>{code}</code>]</b>\n\n{text}"
