"""Abstract translation engine interface."""

from abc import ABC, abstractmethod

from deepl_translator.messages import MessageRequest, Model


class AbstractEngine(ABC):
    """Base class for all translation engines."""

    async def check_login(self) -> bool:
        return True

    def is_local(self) -> bool:
        return False

    def supports_custom_model(self) -> bool:
        return False

    @abstractmethod
    async def get_model(self) -> str:
        """Return the identifier of the model used for requests."""
        ...

    @abstractmethod
    async def list_models(self, api_key: str | None = None) -> list[Model]:
        """Return the models this engine can use."""
        ...

    @abstractmethod
    async def send_message(self, req: MessageRequest) -> None:
        """Run one request and report its result through the callbacks.

        Implementations must not raise for request failures: every error
        goes to ``req.on_error`` exactly once. When ``req.signal`` is set
        before the request completes, no callback fires.

        Args:
            req: Request with translation metadata and result callbacks.
        """
        ...

    async def close(self) -> None:
        """Release resources held by the engine."""
