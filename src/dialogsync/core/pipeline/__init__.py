"""Récupération + agrégation des transcripts multi-langues."""

from dialogsync.core.pipeline.sources import (
    aggregate,
    is_url,
    load_transcripts,
    parse_transcripts,
    read_sources,
)

__all__ = [
    "aggregate",
    "is_url",
    "load_transcripts",
    "parse_transcripts",
    "read_sources",
]
