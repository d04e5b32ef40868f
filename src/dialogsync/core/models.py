"""Modèle de données : dataclasses typées pour dialogues, transcripts, alignements, config."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Dialog:
    """Une ligne de dialogue timecodée (secondes)."""

    begin: float
    end: float
    phrase: str

    def __post_init__(self) -> None:
        if not (self.end >= self.begin >= 0):
            raise ValueError(
                f"Dialog invalide: begin={self.begin!r} end={self.end!r} (attendu end >= begin >= 0)"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"begin": self.begin, "end": self.end, "phrase": self.phrase}


@dataclass(frozen=True)
class Transcript:
    """Transcript mono-langue : durée totale + dialogues dans l'ordre du document."""

    duration: float
    dialogs: tuple[Dialog, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration": self.duration,
            "dialogs": [d.to_dict() for d in self.dialogs],
        }


# Code langue canonique -> Transcript. L'ordre d'insertion définit la langue de base.
TranscriptSet = dict[str, Transcript]


@dataclass(frozen=True)
class AlignedDialog:
    """
    Une ligne de la langue de base, avec la phrase retenue pour chaque autre langue.
    Une langue sans correspondance dans la tolérance est absente de `phrases`.
    """

    begin: float
    end: float
    phrases: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"begin": self.begin, "end": self.end, "phrases": dict(self.phrases)}


@dataclass
class SourceDocument:
    """Résultat de récupération d'une source (contenu brut ou erreur)."""

    locator: str
    content: str | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None


@dataclass(frozen=True)
class SyncConfig:
    """Paramètres réglables (fichier TOML + options CLI)."""

    tolerance_s: float = 1.5
    """Écart maximal (begin ou end) pour apparier deux lignes de langues différentes."""
    strict_language: bool = True
    """Rejeter les documents dont la langue n'est pas supportée (sinon clé = code brut)."""
    timeout_s: float = 30.0
    """Timeout HTTP par requête (secondes)."""
    retries: int = 3
    """Nombre de tentatives HTTP par source."""
    backoff_s: float = 2.0
    """Délai de base du backoff exponentiel entre tentatives."""
    max_concurrency: int = 8
    """Nombre maximal de récupérations simultanées."""
    user_agent: str = "dialogsync/0.1"
    """User-Agent pour les requêtes HTTP."""
    aliases: dict[str, str] = field(default_factory=dict)
    """Alias de langue supplémentaires (tag brut -> code canonique)."""
