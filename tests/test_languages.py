"""Tests normalisation des tags de langue."""

from __future__ import annotations

import pytest

from dialogsync.core.errors import UnsupportedLanguage
from dialogsync.core.languages import (
    LANGUAGE_ALIASES,
    SUPPORTED_LANGUAGES,
    build_alias_table,
    is_supported,
    language_name,
    normalize,
    normalize_strict,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("en", "en"),
        ("en-US", "en"),
        ("pt-BR", "pt"),
        ("pt_br", "pt"),
        ("PT-br", "pt"),
        ("fr-BE", "fr"),
        ("no-NO", "nw"),
        ("nb", "nw"),
        ("zh-Hant", "zh"),
        ("es_419", "es"),
    ],
)
def test_normalize_known_tags(raw: str, expected: str) -> None:
    assert normalize(raw) == expected
    assert is_supported(raw) is True


def test_normalize_is_idempotent() -> None:
    for raw in list(LANGUAGE_ALIASES) + ["pt_br", "EN-gb", "no-NO"]:
        once = normalize(raw)
        assert normalize(once) == once


def test_unsupported_tag_returns_base_subtag() -> None:
    assert is_supported("xx-YY") is False
    assert normalize("xx-YY") == "xx"
    assert normalize("tlh_Latn") == "tlh"
    assert is_supported("") is False


def test_normalize_strict_raises_for_unsupported() -> None:
    assert normalize_strict("pt-BR") == "pt"
    with pytest.raises(UnsupportedLanguage) as exc_info:
        normalize_strict("xx-YY")
    assert exc_info.value.raw_tag == "xx-YY"


def test_language_name() -> None:
    assert language_name("nw") == "Norwegian"
    assert language_name("xx") is None
    assert set(SUPPORTED_LANGUAGES) >= {"en", "es", "fr", "pt", "it", "de", "pl", "sv", "da", "nw"}


def test_build_alias_table_adds_aliases_without_touching_defaults() -> None:
    table = build_alias_table({"iw": "en"})
    assert normalize("iw", table) == "en"
    assert "iw" not in LANGUAGE_ALIASES
    assert build_alias_table(None) is LANGUAGE_ALIASES


def test_build_alias_table_rejects_unknown_target() -> None:
    with pytest.raises(ValueError):
        build_alias_table({"iw": "he"})
