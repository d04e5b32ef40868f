"""Alignement des dialogues entre langues."""

from dialogsync.core.align.aligner import (
    DEFAULT_TOLERANCE_S,
    align_dialogs,
    alignment_coverage,
    find_best_match,
)

__all__ = [
    "DEFAULT_TOLERANCE_S",
    "align_dialogs",
    "alignment_coverage",
    "find_best_match",
]
