"""
Alignement multi-langues des dialogues par proximité temporelle.

La première langue du TranscriptSet sert de pivot : chaque ligne pivot produit un
AlignedDialog, et chaque autre langue y place sa ligne la plus proche.

Choix métier : appariement glouton ligne par ligne, sans contrainte de bijection.
Une même ligne cible peut servir plusieurs lignes pivot (ex. traduction qui fusionne
deux sous-titres). Une affectation un-à-un globale n'est pas faite ici.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from dialogsync.core.models import AlignedDialog, Dialog, Transcript

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_S = 1.5


def find_best_match(
    dialog: Dialog,
    candidates: Sequence[Dialog],
    tolerance_s: float = DEFAULT_TOLERANCE_S,
) -> int | None:
    """
    Index de la ligne de `candidates` la plus proche de `dialog`, None si aucune.

    Candidate si |Δbegin| < tolérance OU |Δend| < tolérance. Score = |Δbegin| + |Δend| ;
    en cas d'égalité la première dans l'ordre de `candidates` l'emporte.
    """
    best_idx: int | None = None
    best_score = 0.0
    for i, cand in enumerate(candidates):
        d_begin = abs(cand.begin - dialog.begin)
        d_end = abs(cand.end - dialog.end)
        if not (d_begin < tolerance_s or d_end < tolerance_s):
            continue
        score = d_begin + d_end
        if best_idx is None or score < best_score:
            best_idx = i
            best_score = score
    return best_idx


def align_dialogs(
    transcripts: Mapping[str, Transcript],
    tolerance_s: float = DEFAULT_TOLERANCE_S,
) -> list[AlignedDialog]:
    """
    Aligne toutes les langues sur la langue de base (première clé).
    Retourne une entrée par ligne de la langue de base, dans son ordre.
    """
    if tolerance_s < 0:
        raise ValueError(f"Tolérance négative: {tolerance_s!r}")
    if not transcripts:
        return []
    languages = list(transcripts.keys())
    base_lang = languages[0]
    others = [(lang, transcripts[lang].dialogs) for lang in languages[1:]]

    aligned: list[AlignedDialog] = []
    for dialog in transcripts[base_lang].dialogs:
        phrases = {base_lang: dialog.phrase}
        for lang, candidates in others:
            idx = find_best_match(dialog, candidates, tolerance_s)
            if idx is not None:
                phrases[lang] = candidates[idx].phrase
        aligned.append(AlignedDialog(begin=dialog.begin, end=dialog.end, phrases=phrases))

    logger.debug(
        "Aligned %d %s lines against %s (tolerance %.2fs)",
        len(aligned),
        base_lang,
        ", ".join(languages[1:]) or "-",
        tolerance_s,
    )
    return aligned


def alignment_coverage(aligned: Sequence[AlignedDialog], languages: Sequence[str]) -> dict[str, float]:
    """Part des lignes pivot ayant reçu une phrase, par langue (0.0 si aucune ligne)."""
    total = len(aligned)
    coverage: dict[str, float] = {}
    for lang in languages:
        matched = sum(1 for row in aligned if lang in row.phrases)
        coverage[lang] = round(matched / total, 4) if total else 0.0
    return coverage
