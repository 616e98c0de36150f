"""FastAPI application receiving messages from the iOS message filter."""

from __future__ import annotations

import logging
import os

from fastapi import BackgroundTasks, FastAPI, Request, Response
from starlette.requests import ClientDisconnect

from smsforward.botsetup.client import TELEGRAM_API_URL
from smsforward.forwarder.auth import authorize
from smsforward.forwarder.secrets import DeviceSecrets
from smsforward.forwarder.telegram import TelegramForwarder

logger = logging.getLogger(__name__)

_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from environment variables."""
    api_url = os.environ.get("TELEGRAM_API_URL", TELEGRAM_API_URL)
    return create_app(DeviceSecrets.from_env(), api_url=api_url)


def create_app(secrets: DeviceSecrets, api_url: str = TELEGRAM_API_URL) -> FastAPI:
    """Create the forwarder app.

    Every request gets an empty 200 so callers learn nothing about
    authorization. Authorized bodies are forwarded in the background.
    """
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    forwarder = TelegramForwarder(secrets, api_url=api_url)

    @app.api_route("/{path:path}", methods=_METHODS)
    async def receive(request: Request, background_tasks: BackgroundTasks) -> Response:
        device = authorize(request.method, request.headers, secrets)
        if device is not None:
            try:
                body = await request.body()
            except ClientDisconnect:
                logger.warning("Client disconnected before body was read for %r", device)
            else:
                background_tasks.add_task(forwarder.forward, device, body)
        return Response(status_code=200)

    return app
