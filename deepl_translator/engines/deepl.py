"""DeepL engine: single-shot translation via the DeepL REST API."""

import asyncio
import logging
from typing import Any, Callable

import httpx

from deepl_translator.config import (
    DEFAULT_DEEPL_API_URL,
    DEFAULT_DEEPL_API_URL_PATH,
    Settings,
    load_settings,
)
from deepl_translator.engines.base import AbstractEngine
from deepl_translator.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    ProviderError,
    RequestCancelled,
    TranslationError,
    UnsupportedLanguageError,
)
from deepl_translator.languages import map_source_language, map_target_language
from deepl_translator.messages import (
    TRANSLATE_MODE,
    Message,
    MessageRequest,
    Model,
)

logger = logging.getLogger(__name__)

MODEL_ID = "deepl"
AUTH_SCHEME = "DeepL-Auth-Key"


def build_url(settings: Settings) -> str:
    """Join the configured base URL and path, falling back to the free API."""
    base = (settings.deepl_api_url or DEFAULT_DEEPL_API_URL).rstrip("/")
    path = settings.deepl_api_url_path or DEFAULT_DEEPL_API_URL_PATH
    return f"{base}/{path.lstrip('/')}"


def _error_message(response: httpx.Response) -> str:
    """Best-effort error message from a failed DeepL response."""
    message = f"DeepL API request failed with status {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return response.text or message
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return message


def _extract_translations(data: Any) -> list[str]:
    items = data.get("translations") if isinstance(data, dict) else None
    if not isinstance(items, list):
        return []
    return [
        item["text"]
        for item in items
        if isinstance(item, dict) and isinstance(item.get("text"), str)
    ]


class DeepLEngine(AbstractEngine):
    """Translates text with the DeepL API.

    Args:
        settings_loader: Returns the current settings; called on every
            request.
        client: HTTP client to use. When omitted the engine creates one
            and closes it in ``close()``.
    """

    def __init__(
        self,
        settings_loader: Callable[[], Settings] = load_settings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings_loader = settings_loader
        self._owns_client: bool = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=30.0)

    async def check_login(self) -> bool:
        return bool(self._settings_loader().deepl_api_key.strip())

    async def get_model(self) -> str:
        return MODEL_ID

    async def list_models(self, api_key: str | None = None) -> list[Model]:
        return [Model(id=MODEL_ID, name="DeepL Translator")]

    async def send_message(self, req: MessageRequest) -> None:
        try:
            url, data, headers = self._prepare(req)
        except TranslationError as exc:
            logger.warning("DeepL request rejected: %s", exc)
            req.on_error(str(exc))
            return

        try:
            response = await self._post(url, data, headers, req.signal)
            if req.on_status_code is not None:
                req.on_status_code(response.status_code)
            content = self._parse_response(response)
        except RequestCancelled:
            logger.debug("DeepL request cancelled by caller")
            return
        except ProviderError as exc:
            logger.warning("DeepL API error: status=%s %s", exc.status_code, exc)
            req.on_error(str(exc))
            return
        except Exception as exc:
            logger.exception("DeepL request failed")
            req.on_error(str(exc) or "Unknown error")
            return

        await req.on_message(Message(content=content, role="", is_full_text=True))
        req.on_finished("stop")

    def _prepare(self, req: MessageRequest) -> tuple[str, dict[str, str], dict[str, str]]:
        """Validate the request and build URL, form body and headers."""
        settings = self._settings_loader()
        api_key = settings.deepl_api_key.strip()
        meta = req.meta

        if not api_key:
            raise ConfigurationError("DeepL API Key is required.")
        if meta is None:
            raise InvalidRequestError("DeepL provider requires translation metadata.")
        if meta.mode != TRANSLATE_MODE:
            raise InvalidRequestError(
                "DeepL API currently only supports the Translate action."
            )
        if not meta.target_lang:
            raise InvalidRequestError(
                "Target language is required for DeepL translation."
            )
        if not meta.original_text:
            raise InvalidRequestError("Text to translate is empty.")

        target_lang = map_target_language(meta.target_lang)
        if target_lang is None:
            raise UnsupportedLanguageError("target", meta.target_lang)

        # No source language means DeepL auto-detects it
        source_lang = map_source_language(meta.source_lang)
        if meta.source_lang and source_lang is None:
            raise UnsupportedLanguageError("source", meta.source_lang)

        data = {"text": meta.original_text, "target_lang": target_lang}
        if source_lang:
            data["source_lang"] = source_lang
        data["split_sentences"] = "nonewlines"
        data["preserve_formatting"] = "1"

        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": f"{AUTH_SCHEME} {api_key}",
        }

        logger.debug(
            "DeepL request: %s -> %s, %d chars",
            source_lang or "auto",
            target_lang,
            len(meta.original_text),
        )
        return build_url(settings), data, headers

    async def _post(
        self,
        url: str,
        data: dict[str, str],
        headers: dict[str, str],
        signal: asyncio.Event | None,
    ) -> httpx.Response:
        """POST the form, aborting as soon as ``signal`` is set.

        Raises:
            RequestCancelled: The signal was set before a response arrived.
        """
        if signal is None:
            return await self._client.post(url, data=data, headers=headers)
        if signal.is_set():
            raise RequestCancelled()

        request = asyncio.ensure_future(
            self._client.post(url, data=data, headers=headers)
        )
        aborted = asyncio.ensure_future(signal.wait())
        try:
            await asyncio.wait(
                {request, aborted}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            request.cancel()
            raise
        finally:
            aborted.cancel()

        if not request.done():
            request.cancel()
            try:
                await request
            except asyncio.CancelledError:
                pass
            raise RequestCancelled()
        return request.result()

    @staticmethod
    def _parse_response(response: httpx.Response) -> str:
        """Return the joined translation text of a DeepL response.

        Raises:
            ProviderError: Non-2xx status or no translation in the body.
        """
        if not response.is_success:
            raise ProviderError(_error_message(response), response.status_code)

        translations = _extract_translations(response.json())
        if not translations:
            raise ProviderError(
                "DeepL API returned an empty response.", response.status_code
            )
        return "\n".join(translations)

    async def close(self) -> None:
        """Close the underlying HTTP client if the engine created it."""
        if self._owns_client:
            await self._client.aclose()
