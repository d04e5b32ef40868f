"""Point d'entrée ligne de commande : récupère, agrège et aligne des sous-titres TTML."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dialogsync.core.align import align_dialogs, alignment_coverage
from dialogsync.core.config import load_config, merge_overrides
from dialogsync.core.export_utils import aligned_to_json, transcripts_to_json, write_aligned_csv
from dialogsync.core.languages import language_name
from dialogsync.core.pipeline import parse_transcripts
from dialogsync.core.utils.logging import setup_logging

logger = logging.getLogger("dialogsync")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dialogsync",
        description="Aligne les dialogues de plusieurs pistes de sous-titres TTML (une langue par source).",
    )
    parser.add_argument(
        "sources",
        nargs="+",
        help="URLs (http/https) ou fichiers locaux ; la première source valide fixe la langue de base.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Fichier de configuration TOML.")
    parser.add_argument("--tolerance", type=float, default=None, help="Tolérance d'alignement (secondes).")
    parser.add_argument(
        "--lenient-language",
        action="store_true",
        help="Accepter les langues non supportées (clé = code brut).",
    )
    parser.add_argument("--format", choices=("json", "csv"), default="json")
    parser.add_argument(
        "--transcripts",
        action="store_true",
        help="Afficher les transcripts agrégés au lieu de l'alignement.",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Timeout HTTP (secondes).")
    parser.add_argument("--retries", type=int, default=None, help="Tentatives HTTP par source.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level=level)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        parser.error(f"config invalide: {e}")
    config = merge_overrides(
        config,
        tolerance_s=args.tolerance,
        timeout_s=args.timeout,
        retries=args.retries,
        strict_language=False if args.lenient_language else None,
    )
    if config.tolerance_s < 0:
        parser.error("--tolerance doit être positive")

    transcripts = parse_transcripts(args.sources, config)
    if not transcripts:
        logger.error("No transcript could be built from %d source(s)", len(args.sources))
        return 1

    languages = list(transcripts.keys())
    for lang in languages:
        logger.info(
            "%s (%s): %d dialogs, %.1fs",
            lang,
            language_name(lang) or "?",
            len(transcripts[lang].dialogs),
            transcripts[lang].duration,
        )

    if args.transcripts:
        sys.stdout.write(transcripts_to_json(transcripts) + "\n")
        return 0

    aligned = align_dialogs(transcripts, tolerance_s=config.tolerance_s)
    for lang, ratio in alignment_coverage(aligned, languages[1:]).items():
        logger.info("Coverage %s -> %s: %.0f%%", languages[0], lang, ratio * 100)
    if args.format == "csv":
        write_aligned_csv(aligned, languages, sys.stdout)
    else:
        sys.stdout.write(aligned_to_json(aligned) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
