"""Tables statiques des langues supportées et des alias de tags (lecture seule)."""

from __future__ import annotations

from types import MappingProxyType

LANGUAGE_NAMES = MappingProxyType(
    {
        "en": "English",
        "es": "Spanish",
        "fr": "French",
        "pt": "Portuguese",
        "it": "Italian",
        "de": "German",
        "pl": "Polish",
        "sv": "Swedish",
        "da": "Danish",
        "nw": "Norwegian",
        "ru": "Russian",
        "zh": "Chinese",
        "ja": "Japanese",
        "ko": "Korean",
    }
)

SUPPORTED_LANGUAGES = frozenset(LANGUAGE_NAMES)

# Tags complets vus chez les fournisseurs -> code canonique. Les codes de base
# s'ajoutent ci-dessous (chacun pointe vers lui-même).
_REGION_ALIASES = {
    "en-US": "en",
    "en-GB": "en",
    "en-AU": "en",
    "es-ES": "es",
    "es-MX": "es",
    "es-419": "es",
    "fr-FR": "fr",
    "fr-CA": "fr",
    "de-DE": "de",
    "it-IT": "it",
    "pt-BR": "pt",
    "pt_BR": "pt",
    "pt-br": "pt",
    "pt_br": "pt",
    "pt-PT": "pt",
    "pl-PL": "pl",
    "sv-SE": "sv",
    "da-DK": "da",
    "ru-RU": "ru",
    "zh-CN": "zh",
    "zh-TW": "zh",
    "zh-Hans": "zh",
    "zh-Hant": "zh",
    "ja-JP": "ja",
    "ko-KR": "ko",
    # Norvégien : code canonique historique `nw`.
    "no": "nw",
    "nb": "nw",
    "nn": "nw",
    "no-NO": "nw",
    "nb-NO": "nw",
    "nn-NO": "nw",
}

LANGUAGE_ALIASES = MappingProxyType(
    {**{code: code for code in SUPPORTED_LANGUAGES}, **_REGION_ALIASES}
)
