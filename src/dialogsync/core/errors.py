"""Erreurs d'extraction de transcript (fatales pour un document, jamais pour l'agrégation)."""

from __future__ import annotations


class TranscriptError(Exception):
    """Erreur de base : le document ne peut pas produire de transcript."""

    pass


class MalformedTimestamp(TranscriptError, ValueError):
    """Timecode illisible (ni ticks, ni HH:MM:SS)."""

    def __init__(self, token: str, message: str | None = None):
        self.token = token
        super().__init__(message or f"Timecode invalide: {token!r}")


class TranscriptParseError(TranscriptError):
    """XML mal formé ou structure tt/body/div/p introuvable."""

    pass


class UnsupportedLanguage(TranscriptError):
    """Le code langue du document ne correspond à aucune langue supportée."""

    def __init__(self, raw_tag: str):
        self.raw_tag = raw_tag
        super().__init__(f"Unsupported language: {raw_tag!r}")


class NoValidEntries(TranscriptError):
    """Aucun paragraphe avec begin/end valides : durée impossible à calculer."""

    pass
