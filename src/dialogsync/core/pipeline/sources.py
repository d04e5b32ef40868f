"""
Agrégation de plusieurs documents (une langue chacun) en un TranscriptSet.

Tolérant aux échecs : une source non récupérée ou non parsable ne contribue rien,
l'agrégation elle-même n'échoue jamais pour une source.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Mapping, Sequence

from dialogsync.core.errors import TranscriptError
from dialogsync.core.languages import build_alias_table
from dialogsync.core.models import SourceDocument, SyncConfig, TranscriptSet
from dialogsync.core.subtitles import parse_ttml_transcripts, read_subtitle_file_content
from dialogsync.core.utils.http import fetch_sources

logger = logging.getLogger(__name__)


def is_url(locator: str) -> bool:
    return locator.lower().startswith(("http://", "https://"))


def aggregate(
    sources: Sequence[SourceDocument],
    *,
    strict_language: bool = True,
    aliases: Mapping[str, str] | None = None,
) -> TranscriptSet:
    """
    Parse chaque source indépendamment puis fusionne dans l'ordre des sources.
    Deux sources de même langue : la dernière l'emporte.
    """
    parsed: list[TranscriptSet] = []
    for source in sources:
        if not source.ok:
            logger.warning("Source skipped (fetch failed): %s: %s", source.locator, source.error)
            continue
        try:
            parsed.append(
                parse_ttml_transcripts(
                    source.content or "",
                    strict_language=strict_language,
                    aliases=aliases,
                )
            )
        except TranscriptError as e:
            logger.warning("Source skipped (%s): %s: %s", type(e).__name__, source.locator, e)

    transcripts: TranscriptSet = {}
    for entry in parsed:
        for lang, transcript in entry.items():
            if lang in transcripts:
                logger.info("Duplicate language %s: later source replaces earlier one", lang)
            transcripts[lang] = transcript
    logger.info(
        "Aggregated %d/%d sources: %s",
        len(parsed),
        len(sources),
        ", ".join(transcripts) or "-",
    )
    return transcripts


def read_sources(paths: Sequence[Path]) -> list[SourceDocument]:
    """Lit des fichiers locaux ; une erreur de lecture est consignée, jamais levée."""
    sources: list[SourceDocument] = []
    for path in paths:
        try:
            sources.append(SourceDocument(locator=str(path), content=read_subtitle_file_content(path)))
        except OSError as e:
            logger.warning("Cannot read %s: %s", path, e)
            sources.append(SourceDocument(locator=str(path), error=e))
    return sources


async def load_transcripts(locators: Sequence[str], config: SyncConfig | None = None) -> TranscriptSet:
    """
    Récupère toutes les sources (URLs en parallèle, fichiers locaux) puis agrège.
    L'ordre des locators est conservé : il définit la langue de base de l'alignement.
    """
    config = config or SyncConfig()
    urls = [loc for loc in locators if is_url(loc)]
    fetched_docs: list[SourceDocument] = []
    if urls:
        fetched_docs = await fetch_sources(
            urls,
            timeout_s=config.timeout_s,
            user_agent=config.user_agent,
            retries=config.retries,
            backoff_s=config.backoff_s,
            max_concurrency=config.max_concurrency,
        )
    fetched = iter(fetched_docs)
    sources: list[SourceDocument] = []
    for loc in locators:
        if is_url(loc):
            sources.append(next(fetched))
        else:
            sources.extend(read_sources([Path(loc)]))
    return aggregate(
        sources,
        strict_language=config.strict_language,
        aliases=build_alias_table(config.aliases),
    )


def parse_transcripts(locators: Sequence[str], config: SyncConfig | None = None) -> TranscriptSet:
    """Version synchrone de `load_transcripts`."""
    return asyncio.run(load_transcripts(locators, config))
