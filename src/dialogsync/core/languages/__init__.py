"""Langues supportées et normalisation des tags."""

from dialogsync.core.languages.codes import LANGUAGE_ALIASES, LANGUAGE_NAMES, SUPPORTED_LANGUAGES
from dialogsync.core.languages.normalize import (
    base_subtag,
    build_alias_table,
    is_supported,
    language_name,
    normalize,
    normalize_strict,
)

__all__ = [
    "LANGUAGE_ALIASES",
    "LANGUAGE_NAMES",
    "SUPPORTED_LANGUAGES",
    "base_subtag",
    "build_alias_table",
    "is_supported",
    "language_name",
    "normalize",
    "normalize_strict",
]
