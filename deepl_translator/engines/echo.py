"""Echo engine: returns input text unchanged. For offline use and testing."""

from deepl_translator.engines.base import AbstractEngine
from deepl_translator.messages import Message, MessageRequest, Model


class EchoEngine(AbstractEngine):
    """Returns the input text unchanged."""

    def is_local(self) -> bool:
        return True

    async def get_model(self) -> str:
        return "echo"

    async def list_models(self, api_key: str | None = None) -> list[Model]:
        return [Model(id="echo", name="Echo")]

    async def send_message(self, req: MessageRequest) -> None:
        if req.signal is not None and req.signal.is_set():
            return
        if req.meta is None or not req.meta.original_text:
            req.on_error("Text to translate is empty.")
            return
        await req.on_message(Message(content=req.meta.original_text, is_full_text=True))
        req.on_finished("stop")
