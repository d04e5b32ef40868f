"""
Normalisation des tags de langue (`pt-BR`, `pt_br`, `no-NO`...) vers un code canonique.

Recherche exacte dans la table d'alias, puis sur le sous-tag de base (avant `-`/`_`),
insensible à la casse. Un tag inconnu renvoie son sous-tag de base tel quel :
`is_supported` / `normalize_strict` permettent à l'appelant de le refuser.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from dialogsync.core.errors import UnsupportedLanguage
from dialogsync.core.languages.codes import LANGUAGE_ALIASES, LANGUAGE_NAMES, SUPPORTED_LANGUAGES

_SUBTAG_SEPARATOR = re.compile(r"[-_]")


def base_subtag(raw_tag: str) -> str:
    """Premier segment du tag (`pt-BR` -> `pt`, `pt_br` -> `pt`)."""
    return _SUBTAG_SEPARATOR.split((raw_tag or "").strip(), maxsplit=1)[0]


def _lookup(raw_tag: str, aliases: Mapping[str, str]) -> str | None:
    tag = (raw_tag or "").strip()
    if not tag:
        return None
    code = aliases.get(tag)
    if code is not None:
        return code
    return aliases.get(base_subtag(tag).lower())


def normalize(raw_tag: str, aliases: Mapping[str, str] | None = None) -> str:
    """Code canonique du tag ; sous-tag de base brut si la langue n'est pas supportée."""
    table = LANGUAGE_ALIASES if aliases is None else aliases
    code = _lookup(raw_tag, table)
    if code is not None:
        return code
    return base_subtag(raw_tag)


def is_supported(raw_tag: str, aliases: Mapping[str, str] | None = None) -> bool:
    table = LANGUAGE_ALIASES if aliases is None else aliases
    return _lookup(raw_tag, table) is not None


def normalize_strict(raw_tag: str, aliases: Mapping[str, str] | None = None) -> str:
    """Comme `normalize`, mais lève UnsupportedLanguage si le tag n'est pas reconnu."""
    table = LANGUAGE_ALIASES if aliases is None else aliases
    code = _lookup(raw_tag, table)
    if code is None:
        raise UnsupportedLanguage(raw_tag)
    return code


def language_name(code: str) -> str | None:
    """Nom d'affichage anglais d'un code canonique (None si inconnu)."""
    return LANGUAGE_NAMES.get(code)


def build_alias_table(extra: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """
    Table d'alias par défaut enrichie d'alias utilisateur (config `[aliases]`).
    Chaque cible doit être un code canonique supporté.
    """
    if not extra:
        return LANGUAGE_ALIASES
    merged = dict(LANGUAGE_ALIASES)
    for tag, code in extra.items():
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Alias {tag!r} -> {code!r} : code cible non supporté")
        merged[str(tag).strip()] = code
    return MappingProxyType(merged)
