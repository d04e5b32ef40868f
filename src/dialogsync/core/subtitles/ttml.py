"""
Parsing TTML (tt/body/div/p) en Transcript mono-langue.

Seul le sous-ensemble utile est interprété : `xml:lang` de la racine, paragraphes `p`
avec `begin`/`end`, enfants inline (`span`, imbriqués ou non) et sauts de ligne `br`.
Styles, régions et métadonnées sont ignorés.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Mapping

from lxml import etree

from dialogsync.core.errors import NoValidEntries, TranscriptParseError, UnsupportedLanguage
from dialogsync.core.languages import base_subtag, is_supported, normalize
from dialogsync.core.models import Dialog, Transcript, TranscriptSet
from dialogsync.core.subtitles.timecodes import to_seconds
from dialogsync.core.utils.text import join_fragments

logger = logging.getLogger(__name__)

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"
# Conteneurs traversés pour trouver les paragraphes
_CONTAINER_TAGS = {"body", "div"}


def _make_parser(encoding: str | None = None) -> etree.XMLParser:
    # Contenu déjà décodé : l'encodage déclaré dans le prologue est ignoré.
    return etree.XMLParser(
        encoding=encoding,
        recover=False,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(el: etree._Element) -> str:
    if not isinstance(el.tag, str):
        return ""
    return etree.QName(el).localname


def _parse_root(content: str | bytes) -> etree._Element:
    if isinstance(content, bytes):
        data = content[3:] if content.startswith(b"\xef\xbb\xbf") else content
        parser = _make_parser()
    else:
        text = content[1:] if content.startswith("\ufeff") else content
        data = text.encode("utf-8")
        parser = _make_parser("utf-8")
    if not data.strip():
        raise TranscriptParseError("Document vide")
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise TranscriptParseError(f"Could not parse XML content: {e}") from e


def _find_child(el: etree._Element, name: str) -> etree._Element | None:
    for child in el:
        if _local_name(child) == name:
            return child
    return None


def iter_paragraphs(container: etree._Element) -> Iterator[etree._Element]:
    """Parcours récursif body/div : renvoie les `p` dans l'ordre du document."""
    for child in container:
        name = _local_name(child)
        if name == "p":
            yield child
        elif name in _CONTAINER_TAGS:
            yield from iter_paragraphs(child)


def _string_value(el: etree._Element) -> str:
    """Texte d'un enfant inline, concaténé sans séparateur ; `br` devient un espace."""
    if _local_name(el) == "br":
        return " "
    parts = [el.text or ""]
    for child in el:
        if isinstance(child.tag, str):
            parts.append(_string_value(child))
        parts.append(child.tail or "")
    return "".join(parts)


def extract_phrase(paragraph: etree._Element) -> str:
    """
    Reconstruit la phrase d'un paragraphe.
    Chaque enfant inline (suivi de son texte de queue) est un fragment ; les fragments sont
    séparés par un espace, un `br` vaut un espace, un enfant vide ne contribue rien.
    Blancs fusionnés puis rognés.
    """
    fragments: list[str] = [paragraph.text or ""]
    for child in paragraph:
        if isinstance(child.tag, str):
            fragments.append(_string_value(child) + (child.tail or ""))
        else:
            fragments[-1] += child.tail or ""
    return join_fragments(fragments)


def _read_timing(paragraph: etree._Element) -> tuple[float, float] | None:
    """(begin, end) en secondes, None si un attribut manque ou si begin/end sont incohérents."""
    raw_begin = paragraph.get("begin")
    raw_end = paragraph.get("end")
    if raw_begin is None or raw_end is None:
        return None
    begin = to_seconds(raw_begin)
    end = to_seconds(raw_end)
    if not (end >= begin >= 0):
        return None
    return begin, end


def read_language(root: etree._Element) -> str:
    raw = root.get(XML_LANG) or root.get("lang")
    if raw is None or not raw.strip():
        raise TranscriptParseError("Attribut xml:lang manquant sur <tt>")
    return raw.strip()


def parse_ttml(
    content: str | bytes,
    *,
    strict_language: bool = True,
    aliases: Mapping[str, str] | None = None,
) -> tuple[str, Transcript]:
    """
    Parse un document TTML. Retourne (code langue canonique, Transcript).

    Raises:
        TranscriptParseError: XML mal formé ou structure tt/body/div attendue absente.
        UnsupportedLanguage: langue non supportée (si strict_language).
        MalformedTimestamp: begin/end illisible.
        NoValidEntries: aucun paragraphe avec begin/end valides.
    """
    root = _parse_root(content)
    if _local_name(root) != "tt":
        raise TranscriptParseError(f"Racine inattendue: <{_local_name(root)}> (attendu <tt>)")

    raw_lang = read_language(root)
    if is_supported(raw_lang, aliases):
        lang = normalize(raw_lang, aliases)
    elif strict_language:
        raise UnsupportedLanguage(raw_lang)
    else:
        lang = base_subtag(raw_lang)
        logger.warning("Unsupported language %r accepted as %r", raw_lang, lang)

    body = _find_child(root, "body")
    if body is None:
        raise TranscriptParseError("Élément <body> introuvable")
    has_container = any(_local_name(child) in ("div", "p") for child in body)
    if not has_container:
        raise TranscriptParseError("Aucun conteneur <div>/<p> sous <body>")

    dialogs: list[Dialog] = []
    skipped = 0
    for index, paragraph in enumerate(iter_paragraphs(body)):
        phrase = extract_phrase(paragraph)
        timing = _read_timing(paragraph)
        if timing is None:
            skipped += 1
            if phrase:
                logger.warning("Paragraph %d has no valid begin/end, skipped: %r", index, phrase)
            else:
                logger.debug("Paragraph %d empty and untimed, skipped", index)
            continue
        begin, end = timing
        dialogs.append(Dialog(begin=begin, end=end, phrase=phrase))

    duration = _duration_from_last_valid(dialogs)
    logger.debug(
        "Parsed TTML lang=%s dialogs=%d skipped=%d duration=%.3fs",
        lang,
        len(dialogs),
        skipped,
        duration,
    )
    return lang, Transcript(duration=duration, dialogs=tuple(dialogs))


def _duration_from_last_valid(dialogs: list[Dialog]) -> float:
    # Seuls les paragraphes valides sont retenus : le dernier porte la durée.
    if not dialogs:
        raise NoValidEntries("Aucun paragraphe avec begin/end valides")
    return dialogs[-1].end


def parse_ttml_transcripts(
    content: str | bytes,
    *,
    strict_language: bool = True,
    aliases: Mapping[str, str] | None = None,
) -> TranscriptSet:
    """Comme `parse_ttml`, sous forme de mapping à une entrée {code: Transcript}."""
    lang, transcript = parse_ttml(content, strict_language=strict_language, aliases=aliases)
    return {lang: transcript}


# Encodages à essayer à l'import (fichiers Windows / utilisateur)
_SUBTITLE_ENCODINGS = ("utf-8", "cp1252", "latin-1")


def read_subtitle_file_content(path: Path) -> str:
    """
    Lit le contenu d'un fichier de sous-titres en essayant utf-8, puis cp1252, puis latin-1.
    Retourne la chaîne en Unicode.
    """
    for enc in _SUBTITLE_ENCODINGS:
        try:
            return path.read_text(encoding=enc)
        except (UnicodeDecodeError, LookupError):
            continue
    return path.read_text(encoding="utf-8", errors="replace")
