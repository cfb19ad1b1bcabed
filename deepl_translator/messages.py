"""Request and result types shared by all translation engines."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, Literal

if TYPE_CHECKING:
    from deepl_translator.engines.base import AbstractEngine

TRANSLATE_MODE = "translate"


@dataclass(frozen=True)
class Model:
    id: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class Message:
    """A chunk of engine output delivered through ``on_message``."""

    content: str
    role: str = ""
    is_full_text: bool = False


@dataclass
class MessageRequestMeta:
    """Translation metadata attached to a request."""

    original_text: str = ""
    source_lang: str | None = None
    target_lang: str | None = None
    mode: str | None = None
    writing: bool = False
    selected_word: str | None = None


MessageCallback = Callable[[Message], Awaitable[None]]
ErrorCallback = Callable[[str], None]
FinishedCallback = Callable[[str], None]
StatusCodeCallback = Callable[[int], None]


@dataclass
class MessageRequest:
    """One request to an engine, with the callbacks that receive its result.

    Args:
        on_message: Awaited with each output message.
        on_error: Called once with a terminal error message.
        on_finished: Called once with the finish reason after success.
        on_status_code: Optional, receives the HTTP status of the call.
        signal: Optional cancellation token. Setting it aborts the request
            and suppresses every callback.
        meta: Translation metadata.
    """

    on_message: MessageCallback
    on_error: ErrorCallback
    on_finished: FinishedCallback
    on_status_code: StatusCodeCallback | None = None
    signal: asyncio.Event | None = None
    meta: MessageRequestMeta | None = None
    role_prompt: str = ""
    command_prompt: str = ""


@dataclass
class TranslationOutcome:
    """Callback-free result of a single request."""

    status: Literal["success", "error", "cancelled"] = "cancelled"
    content: str = ""
    error: str | None = None
    status_code: int | None = None
    messages: list[Message] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "success"


async def request_outcome(
    engine: AbstractEngine,
    meta: MessageRequestMeta,
    signal: asyncio.Event | None = None,
) -> TranslationOutcome:
    """Run one request on ``engine`` and collect what its callbacks report.

    The outcome stays ``cancelled`` when the engine reported neither an
    error nor a finished message.
    """
    outcome = TranslationOutcome()
    content_parts: list[str] = []

    async def on_message(message: Message) -> None:
        outcome.messages.append(message)
        if message.is_full_text:
            content_parts.clear()
        content_parts.append(message.content)

    def on_error(error: str) -> None:
        outcome.status = "error"
        outcome.error = error

    def on_finished(reason: str) -> None:
        outcome.status = "success"
        outcome.content = "".join(content_parts)

    def on_status_code(code: int) -> None:
        outcome.status_code = code

    await engine.send_message(
        MessageRequest(
            on_message=on_message,
            on_error=on_error,
            on_finished=on_finished,
            on_status_code=on_status_code,
            signal=signal,
            meta=meta,
        )
    )
    return outcome
