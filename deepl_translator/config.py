"""Environment variable loading with defaults."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

DEFAULT_DEEPL_API_URL = "https://api-free.deepl.com"
DEFAULT_DEEPL_API_URL_PATH = "/v2/translate"


@dataclass(frozen=True)
class Settings:
    """User settings consumed by the engines.

    Empty URL fields mean "use the DeepL default".
    """

    deepl_api_key: str = ""
    deepl_api_url: str = ""
    deepl_api_url_path: str = ""
    translation_engine: str = "deepl"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment.

    Called on every request so that a changed key or endpoint is picked up
    without restarting.
    """
    return Settings(
        deepl_api_key=os.environ.get("DEEPL_API_KEY", ""),
        deepl_api_url=os.environ.get("DEEPL_API_URL", ""),
        deepl_api_url_path=os.environ.get("DEEPL_API_URL_PATH", ""),
        translation_engine=os.environ.get("TRANSLATION_ENGINE", "deepl"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )
