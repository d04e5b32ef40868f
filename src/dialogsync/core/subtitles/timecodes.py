"""
Conversion des timecodes TTML en secondes.
Deux formats : ticks (`12345678t`, 10 000 000 ticks = 1 s) et horloge `HH:MM:SS[.fraction]`.
"""

from __future__ import annotations

import re

from dialogsync.core.errors import MalformedTimestamp

TICKS_PER_SECOND = 10_000_000
TICKS_SUFFIX = "t"

_INT_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^\d+(?:\.\d*)?$|^\.\d+$")


def ticks_to_seconds(token: str) -> float:
    """Convertit `12345678t` (ou `12345678`) en secondes."""
    raw = (token or "").strip()
    digits = raw[: -len(TICKS_SUFFIX)] if raw.endswith(TICKS_SUFFIX) else raw
    if not _INT_RE.match(digits):
        raise MalformedTimestamp(token)
    return int(digits) / TICKS_PER_SECOND


def hhmmss_to_seconds(token: str) -> float:
    """Convertit `HH:MM:SS[.fraction]` en secondes (chaque champ peut être décimal)."""
    parts = (token or "").strip().split(":")
    if len(parts) != 3:
        raise MalformedTimestamp(token)
    values: list[float] = []
    for part in parts:
        part = part.strip()
        if not _DECIMAL_RE.match(part):
            raise MalformedTimestamp(token)
        values.append(float(part))
    h, m, s = values
    return h * 3600 + m * 60 + s


def to_seconds(token: str) -> float:
    """
    Convertit un timecode en secondes.

    Ordre de détection : suffixe ticks, puis présence de `:`, sinon ticks nus.

    Raises:
        MalformedTimestamp: si le timecode n'est pas lisible.
    """
    if token is None:
        raise MalformedTimestamp("", "Timecode absent")
    raw = token.strip()
    if raw.endswith(TICKS_SUFFIX):
        return ticks_to_seconds(raw)
    if ":" in raw:
        return hhmmss_to_seconds(raw)
    return ticks_to_seconds(raw)


def format_seconds(seconds: float) -> str:
    """Formatte des secondes en `HH:MM:SS.mmm` (affichage, export CSV)."""
    total_ms = int(round(max(0.0, float(seconds)) * 1000))
    s, ms_rem = divmod(total_ms, 1000)
    m, s_rem = divmod(s, 60)
    h, m_rem = divmod(m, 60)
    return f"{h:02d}:{m_rem:02d}:{s_rem:02d}.{ms_rem:03d}"
