"""Language code mapping between application tags and DeepL codes."""

from collections.abc import Mapping
from types import MappingProxyType

# DeepL accepts a single generic code per source language
SOURCE_LANGUAGES: Mapping[str, str] = MappingProxyType({
    "bg": "BG",
    "cs": "CS",
    "da": "DA",
    "de": "DE",
    "el": "EL",
    "en": "EN",
    "en-US": "EN",
    "en-GB": "EN",
    "en-CA": "EN",
    "en-AU": "EN",
    "es": "ES",
    "et": "ET",
    "fi": "FI",
    "fr": "FR",
    "hu": "HU",
    "id": "ID",
    "it": "IT",
    "ja": "JA",
    "ko": "KO",
    "lt": "LT",
    "lv": "LV",
    "nl": "NL",
    "pl": "PL",
    "pt": "PT",
    "ro": "RO",
    "ru": "RU",
    "sk": "SK",
    "sl": "SL",
    "sv": "SV",
    "tr": "TR",
    "uk": "UK",
    "zh": "ZH",
    "zh-Hans": "ZH",
    "zh-Hant": "ZH",
})

# Target codes distinguish the output dialect (EN-US/EN-GB, PT-PT)
TARGET_LANGUAGES: Mapping[str, str] = MappingProxyType({
    "bg": "BG",
    "cs": "CS",
    "da": "DA",
    "de": "DE",
    "el": "EL",
    "en": "EN-US",
    "en-US": "EN-US",
    "en-GB": "EN-GB",
    "en-CA": "EN-US",
    "en-AU": "EN-US",
    "es": "ES",
    "et": "ET",
    "fi": "FI",
    "fr": "FR",
    "hu": "HU",
    "id": "ID",
    "it": "IT",
    "ja": "JA",
    "ko": "KO",
    "lt": "LT",
    "lv": "LV",
    "nl": "NL",
    "pl": "PL",
    "pt": "PT-PT",
    "ro": "RO",
    "ru": "RU",
    "sk": "SK",
    "sl": "SL",
    "sv": "SV",
    "tr": "TR",
    "uk": "UK",
    "zh": "ZH",
    "zh-Hans": "ZH",
    "zh-Hant": "ZH",
})


def map_language(table: Mapping[str, str], tag: str | None) -> str | None:
    """Map an application language tag to a DeepL language code.

    An exact match wins. Otherwise the region subtag is dropped
    ("de-AT" -> "de") and the lookup is retried once.

    Args:
        table: SOURCE_LANGUAGES or TARGET_LANGUAGES.
        tag: Language tag such as "en-GB", or None.

    Returns:
        DeepL language code, or None if the tag is empty or unsupported.
    """
    if not tag:
        return None
    if tag in table:
        return table[tag]
    return table.get(tag.split("-")[0])


def map_source_language(tag: str | None) -> str | None:
    return map_language(SOURCE_LANGUAGES, tag)


def map_target_language(tag: str | None) -> str | None:
    return map_language(TARGET_LANGUAGES, tag)
