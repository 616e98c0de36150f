"""Per-device secrets: auth token, bot token and destination chat."""

from __future__ import annotations

import os
from collections.abc import Mapping

DEFAULT_PREFIX = "SMSFORWARD_"


class DeviceSecrets:
    """Looks up per-device secrets by name.

    For a device ``phone`` the names are ``phone`` (the device's auth
    token), ``phone_bot_token`` and ``phone_chat_id``, each under prefix.
    """

    def __init__(self, values: Mapping[str, str], prefix: str = "") -> None:
        self._values = values
        self._prefix = prefix

    @classmethod
    def from_env(cls) -> DeviceSecrets:
        """Create DeviceSecrets over the process environment."""
        prefix = os.environ.get("SMS_SECRET_PREFIX", DEFAULT_PREFIX)
        return cls(os.environ, prefix=prefix)

    def _get(self, name: str) -> str | None:
        return self._values.get(f"{self._prefix}{name}")

    def device_token(self, device: str) -> str | None:
        return self._get(device)

    def bot_token(self, device: str) -> str | None:
        return self._get(f"{device}_bot_token")

    def chat_id(self, device: str) -> str | None:
        return self._get(f"{device}_chat_id")
