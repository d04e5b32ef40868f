"""Utilitaires HTTP : récupération concurrente des documents avec timeout, retry, backoff."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx

from dialogsync.core.models import SourceDocument

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "dialogsync/0.1"

_RETRYABLE_STATUS_CODES = {
    408,  # Request Timeout
    409,  # Conflict
    425,  # Too Early
    429,  # Too Many Requests
    500,
    502,
    503,
    504,
}


def _parse_retry_after_seconds(response: httpx.Response | None) -> float | None:
    """Parse Retry-After en secondes (format numérique uniquement)."""
    if response is None:
        return None
    raw = (response.headers.get("Retry-After") or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if value < 0:
        return None
    return value


async def fetch_text_async(
    client: httpx.AsyncClient,
    url: str,
    *,
    retries: int = 3,
    backoff_s: float = 2.0,
) -> str:
    """
    Récupère le contenu texte d'une URL avec retry et backoff exponentiel.

    Seuls les statuts transitoires (408, 429, 5xx...) et les erreurs de transport
    déclenchent une nouvelle tentative ; un Retry-After numérique est respecté.

    Raises:
        httpx.HTTPError: Si toutes les tentatives échouent.
    """
    attempts = max(1, int(retries))
    backoff_base = max(0.0, float(backoff_s))
    last_exc: Exception | None = None

    for attempt in range(attempts):
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            # Les documents TTML sont en UTF-8 quand le charset est absent ou douteux
            if resp.encoding in (None, "ascii", "ISO-8859-1"):
                resp.encoding = "utf-8"
            return resp.text
        except httpx.HTTPStatusError as exc:
            last_exc = exc
            status_code = exc.response.status_code if exc.response is not None else None
            is_retryable = status_code in _RETRYABLE_STATUS_CODES
            if not is_retryable or attempt >= attempts - 1:
                raise
            retry_after = _parse_retry_after_seconds(exc.response)
            delay = retry_after if retry_after is not None else backoff_base * (2**attempt)
            logger.debug("HTTP %s on %s, retry in %.1fs", status_code, url, delay)
            if delay > 0:
                await asyncio.sleep(delay)
        except httpx.TransportError as exc:
            last_exc = exc
            if attempt >= attempts - 1:
                break
            delay = backoff_base * (2**attempt)
            logger.debug("Transport error on %s (%s), retry in %.1fs", url, exc, delay)
            if delay > 0:
                await asyncio.sleep(delay)

    if last_exc is not None:
        raise last_exc
    raise RuntimeError("fetch_text_async failed without explicit exception")


async def fetch_sources(
    urls: Sequence[str],
    *,
    client: httpx.AsyncClient | None = None,
    timeout_s: float = 30.0,
    user_agent: str | None = DEFAULT_USER_AGENT,
    retries: int = 3,
    backoff_s: float = 2.0,
    max_concurrency: int = 8,
) -> list[SourceDocument]:
    """
    Récupère toutes les URLs en parallèle et attend qu'elles soient toutes terminées.

    Ne lève jamais pour une source : l'échec est consigné dans SourceDocument.error.
    L'ordre du résultat est celui de `urls`.
    """
    semaphore = asyncio.Semaphore(max(1, int(max_concurrency)))

    async def _one(http: httpx.AsyncClient, url: str) -> SourceDocument:
        async with semaphore:
            try:
                content = await fetch_text_async(http, url, retries=retries, backoff_s=backoff_s)
            except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
                logger.warning("Fetch failed for %s: %s", url, exc)
                return SourceDocument(locator=url, error=exc)
        logger.debug("Fetched %s (%d chars)", url, len(content))
        return SourceDocument(locator=url, content=content)

    if client is not None:
        return list(await asyncio.gather(*(_one(client, url) for url in urls)))

    headers = {"User-Agent": user_agent} if user_agent else None
    async with httpx.AsyncClient(
        timeout=timeout_s,
        follow_redirects=True,
        headers=headers,
    ) as http:
        return list(await asyncio.gather(*(_one(http, url) for url in urls)))
