"""Chargement de la configuration TOML (tolérance, politique langue, HTTP, alias)."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

from dialogsync.core.languages import build_alias_table
from dialogsync.core.models import SyncConfig

logger = logging.getLogger(__name__)

_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "tolerance_s": (int, float),
    "strict_language": (bool,),
    "timeout_s": (int, float),
    "retries": (int,),
    "backoff_s": (int, float),
    "max_concurrency": (int,),
    "user_agent": (str,),
}


def read_toml(path: Path) -> dict[str, Any]:
    """Lit un fichier TOML (stdlib tomllib en 3.11+)."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore
    with open(path, "rb") as file_obj:
        return tomllib.load(file_obj)


def config_from_mapping(data: dict[str, Any]) -> SyncConfig:
    """
    Construit un SyncConfig depuis un dict (clés TOML de premier niveau + table `[aliases]`).
    Clés inconnues ignorées (warning) ; type invalide -> ValueError.
    """
    values: dict[str, Any] = {}
    for key, value in data.items():
        if key == "aliases":
            if not isinstance(value, dict):
                raise ValueError("[aliases] doit être une table tag = \"code\"")
            aliases = {str(tag): str(code) for tag, code in value.items()}
            build_alias_table(aliases)  # valide les codes cibles
            values["aliases"] = aliases
            continue
        expected = _FIELD_TYPES.get(key)
        if expected is None:
            logger.warning("Unknown config key ignored: %s", key)
            continue
        # bool est un int : on le refuse pour les champs numériques
        if not isinstance(value, expected) or (bool not in expected and isinstance(value, bool)):
            raise ValueError(f"Config {key!r}: type invalide ({type(value).__name__})")
        values[key] = float(value) if float in expected else value
    config = SyncConfig(**values)
    if config.tolerance_s < 0:
        raise ValueError(f"Config 'tolerance_s' négative: {config.tolerance_s!r}")
    return config


def load_config(path: Path | None) -> SyncConfig:
    """Charge la config depuis un fichier TOML ; config par défaut si path est None."""
    if path is None:
        return SyncConfig()
    return config_from_mapping(read_toml(path))


def merge_overrides(config: SyncConfig, **overrides: Any) -> SyncConfig:
    """Applique les options CLI (valeurs None ignorées)."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    return dataclasses.replace(config, **changes) if changes else config
