"""Device authorization for forwarded messages."""

from __future__ import annotations

import hmac
from collections.abc import Mapping

from smsforward.forwarder.secrets import DeviceSecrets


def authorize(method: str, headers: Mapping[str, str], secrets: DeviceSecrets) -> str | None:
    """Return the device name if the request is authorized, else None.

    Expects ``Authorization: Bearer <device>/<token>`` on a POST, where
    token must equal the device's secret. Comparison is constant-time.
    """
    if method.upper() != "POST":
        return None
    authorization = headers.get("authorization")
    if authorization is None:
        return None
    authorization = authorization.strip()
    while authorization.startswith("Bearer "):
        authorization = authorization[len("Bearer "):]
    device, sep, token = authorization.partition("/")
    if not sep:
        return None
    secret = secrets.device_token(device)
    if secret is None:
        return None
    if not hmac.compare_digest(token.encode(), secret.encode()):
        return None
    return device
