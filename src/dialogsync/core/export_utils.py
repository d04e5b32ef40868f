"""Export des dialogues alignés et des transcripts (JSON, CSV)."""

from __future__ import annotations

import csv
import json
from typing import Sequence, TextIO

from dialogsync.core.models import AlignedDialog, TranscriptSet
from dialogsync.core.subtitles.timecodes import format_seconds

ALIGNED_BASE_COLUMNS = ["begin", "end"]


def aligned_to_json(aligned: Sequence[AlignedDialog]) -> str:
    """Liste d'objets { begin, end, phrases: {lang: texte} }."""
    return json.dumps([row.to_dict() for row in aligned], ensure_ascii=False, indent=2)


def transcripts_to_json(transcripts: TranscriptSet) -> str:
    """Objet { lang: { duration, dialogs: [...] } } dans l'ordre des langues."""
    data = {lang: transcript.to_dict() for lang, transcript in transcripts.items()}
    return json.dumps(data, ensure_ascii=False, indent=2)


def write_aligned_csv(aligned: Sequence[AlignedDialog], languages: Sequence[str], stream: TextIO) -> None:
    """CSV : begin, end (HH:MM:SS.mmm) puis une colonne par langue (vide si pas de correspondance)."""
    w = csv.writer(stream)
    w.writerow(ALIGNED_BASE_COLUMNS + list(languages))
    for row in aligned:
        w.writerow(
            [format_seconds(row.begin), format_seconds(row.end)]
            + [row.phrases.get(lang, "") for lang in languages]
        )
