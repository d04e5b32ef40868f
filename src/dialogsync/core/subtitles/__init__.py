"""Import sous-titres TTML : timecodes + extraction de transcript."""

from dialogsync.core.subtitles.timecodes import (
    TICKS_PER_SECOND,
    format_seconds,
    hhmmss_to_seconds,
    ticks_to_seconds,
    to_seconds,
)
from dialogsync.core.subtitles.ttml import (
    extract_phrase,
    iter_paragraphs,
    parse_ttml,
    parse_ttml_transcripts,
    read_subtitle_file_content,
)

__all__ = [
    "TICKS_PER_SECOND",
    "format_seconds",
    "hhmmss_to_seconds",
    "ticks_to_seconds",
    "to_seconds",
    "extract_phrase",
    "iter_paragraphs",
    "parse_ttml",
    "parse_ttml_transcripts",
    "read_subtitle_file_content",
]
