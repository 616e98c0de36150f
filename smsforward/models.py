"""Shared Pydantic data models for sms-forward-bot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

WEBHOOK_URL = "https://sms.nk0.uk/"

# --- Bot setup models ---


class WebhookConfig(BaseModel):
    """Body of a setWebhook call."""

    model_config = ConfigDict(frozen=True)

    url: str = WEBHOOK_URL
    allowed_updates: list[str] = Field(default_factory=lambda: ["message"])
    drop_pending_updates: bool = True
    secret_token: str


class BotCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    command: str
    description: str


class CommandMenu(BaseModel):
    """Body of a setMyCommands call."""

    model_config = ConfigDict(frozen=True)

    commands: list[BotCommand]


DEFAULT_COMMANDS = (
    BotCommand(command="info", description="Command device to report current status"),
    BotCommand(command="version", description="Query bot version"),
)


def default_command_menu() -> CommandMenu:
    return CommandMenu(commands=list(DEFAULT_COMMANDS))


# --- Forwarder models ---


class FilterMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class FilterQueryInner(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: str
    message: FilterMessage


class AppleMessageFilterQuery(BaseModel):
    """Query posted by the iOS message filter extension."""

    model_config = ConfigDict(frozen=True)

    inner: FilterQueryInner = Field(alias="query")

    @property
    def sender(self) -> str:
        return self.inner.sender

    @property
    def text(self) -> str:
        return self.inner.message.text

    @property
    def code(self) -> str | None:
        from smsforward.forwarder.sms import extract_code

        return extract_code(self.text)


class SendMessageBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    chat_id: str
    text: str
    parse_mode: str = "HTML"
