"""Errors raised while preparing or running a translation request.

Engines raise these internally and report them through the request's
``on_error`` callback; they never reach the caller of ``send_message``.
"""


class TranslationError(Exception):
    """Base class for all translation errors."""


class ConfigurationError(TranslationError):
    """A required setting (e.g. the API key) is missing."""


class InvalidRequestError(TranslationError):
    """The request is missing metadata, text or a target language."""


class UnsupportedLanguageError(TranslationError):
    """A language tag has no DeepL equivalent."""

    def __init__(self, role: str, tag: str) -> None:
        self.role = role
        self.tag = tag
        super().__init__(f"Unsupported {role} language for DeepL: {tag}")


class ProviderError(TranslationError):
    """DeepL rejected the request or returned no translation."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RequestCancelled(Exception):
    """The caller set the request's cancellation signal."""
