"""Tests for the bot setup CLI."""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock, patch

import httpx
import pytest
from click.testing import CliRunner

from smsforward.botsetup.cli import cli
from tests.conftest import FakeHttpClient


def _invoke(client: FakeHttpClient, args: list[str]):  # noqa: ANN202
    runner = CliRunner()
    return runner.invoke(cli, args, obj={"client": client})


def test_set_webhook_outputs_pretty_json() -> None:
    client = FakeHttpClient()
    result = _invoke(client, ["set-webhook", "123:ABC", "hunter2"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"ok": True, "result": True}
    assert '\n  "ok": true' in result.output


def test_set_webhook_sends_expected_request() -> None:
    client = FakeHttpClient()
    _invoke(client, ["set-webhook", "123:ABC", "hunter2"])
    request = client.requests[0]
    assert request.url == "https://api.telegram.org/bot123:ABC/setWebhook"
    assert request.json()["secret_token"] == "hunter2"


def test_set_commands_sends_expected_request() -> None:
    client = FakeHttpClient()
    result = _invoke(client, ["set-commands", "123:ABC"])
    assert result.exit_code == 0
    assert [c["command"] for c in client.requests[0].json()["commands"]] == ["info", "version"]


def test_api_url_option() -> None:
    client = FakeHttpClient()
    _invoke(client, ["set-commands", "--api-url", "http://localhost:8081", "T"])
    assert client.requests[0].url == "http://localhost:8081/botT/setMyCommands"


def test_missing_secret_is_usage_error() -> None:
    client = FakeHttpClient()
    result = _invoke(client, ["set-webhook", "123:ABC"])
    assert result.exit_code == 2
    assert client.requests == []


def test_api_error_exits_nonzero_and_prints_body() -> None:
    client = FakeHttpClient(
        status_code=401,
        response='{"ok":false,"error_code":401,"description":"Unauthorized"}',
    )
    result = _invoke(client, ["set-commands", "bad"])
    assert result.exit_code == 1
    assert json.loads(result.output) == {
        "ok": False, "error_code": 401, "description": "Unauthorized",
    }


def test_transport_error_exits_nonzero() -> None:
    runner = CliRunner()
    with patch(
        "smsforward.botsetup.cli.HttpxClient.post_json",
        side_effect=httpx.ConnectError("connection refused"),
    ):
        result = runner.invoke(cli, ["set-webhook", "T", "S"])
    assert result.exit_code == 1
    assert "request failed" in result.output
    assert "connection refused" in result.output


def test_non_json_response_echoes_raw_body() -> None:
    client = FakeHttpClient(status_code=502, response="<html>Bad Gateway</html>")
    result = _invoke(client, ["set-webhook", "T", "S"])
    assert result.exit_code == 1
    assert "<html>Bad Gateway</html>" in result.output
    assert "not valid JSON" in result.output


def test_standalone_command_uses_httpx_client() -> None:
    from smsforward.botsetup.cli import set_commands_command

    runner = CliRunner()
    with patch(
        "smsforward.botsetup.cli.HttpxClient.post_json",
        return_value=(200, '{"ok":true}'),
    ) as mock_post:
        result = runner.invoke(set_commands_command, ["123:ABC"])
    assert result.exit_code == 0
    url, headers, body = mock_post.call_args[0]
    assert url == "https://api.telegram.org/bot123:ABC/setMyCommands"
    assert json.loads(body)["commands"][1]["command"] == "version"


def test_timeout_option_reaches_http_client() -> None:
    runner = CliRunner()
    with patch("smsforward.botsetup.cli.HttpxClient") as mock_client_cls:
        mock_client = MagicMock()
        mock_client.post_json.return_value = (200, '{"ok":true}')
        mock_client_cls.return_value = mock_client
        result = runner.invoke(cli, ["set-commands", "--timeout", "2.5", "T"])
    assert result.exit_code == 0
    mock_client_cls.assert_called_once_with(timeout=2.5)


def test_verbose_configures_debug_logging() -> None:
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    logging.getLogger("httpcore").setLevel(logging.NOTSET)
    runner = CliRunner()
    with patch("smsforward.botsetup.cli.logging.basicConfig") as mock_basic_config:
        result = runner.invoke(cli, ["set-commands", "-v", "T"], obj={"client": FakeHttpClient()})
    assert result.exit_code == 0
    mock_basic_config.assert_called_once()
    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_verbose_logging_never_shows_bot_token(caplog: pytest.LogCaptureFixture) -> None:
    real_client = httpx.Client
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))

    def _client(**kwargs: object) -> httpx.Client:
        return real_client(transport=transport, **kwargs)  # type: ignore[arg-type]

    logging.getLogger("httpx").setLevel(logging.NOTSET)
    caplog.set_level(logging.DEBUG)
    runner = CliRunner()
    with patch("smsforward.botsetup.client.httpx.Client", side_effect=_client):
        result = runner.invoke(cli, ["set-commands", "-v", "123:SECRETTOKEN"])
    assert result.exit_code == 0
    assert "bot***/setMyCommands" in caplog.text
    assert "SECRETTOKEN" not in caplog.text
