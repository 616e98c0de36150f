"""Telegram delivery for forwarded SMS messages."""

from __future__ import annotations

import logging

import httpx

from smsforward.botsetup.client import TELEGRAM_API_URL, bot_api_url
from smsforward.forwarder.secrets import DeviceSecrets
from smsforward.forwarder.sms import render_message
from smsforward.models import SendMessageBody

logger = logging.getLogger(__name__)


class TelegramForwarder:
    """Sends a device's message to its configured Telegram chat."""

    def __init__(self, secrets: DeviceSecrets, api_url: str = TELEGRAM_API_URL) -> None:
        self._secrets = secrets
        self._api_url = api_url

    async def forward(self, device: str, body: bytes) -> None:
        """Render body and send it via sendMessage.

        Runs after the HTTP response has been returned, so failures are
        logged rather than raised. No retry.
        """
        bot_token = self._secrets.bot_token(device)
        if bot_token is None:
            logger.error("bot_token not found for %r", device)
            return
        chat_id = self._secrets.chat_id(device)
        if chat_id is None:
            logger.error("chat_id not found for %r", device)
            return

        payload = SendMessageBody(chat_id=chat_id, text=render_message(device, body))
        url = bot_api_url(bot_token, "sendMessage", self._api_url)

        async with httpx.AsyncClient(verify=True) as client:
            try:
                resp = await client.post(
                    url,
                    content=payload.model_dump_json(),
                    headers={"content-type": "application/json"},
                )
            except httpx.HTTPError as exc:
                logger.error("sendMessage failed for %r: %s", device, exc)
                return
        logger.info("sendMessage for %r returned HTTP %d", device, resp.status_code)
