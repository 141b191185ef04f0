"""
settings.py

Responsibility: Decide which package type names are declared.

The surrounding build project owns the member set. By default only `Zip` is
declared; a deployment can point `PACKAGE_DESCRIPTOR_TYPES_FILE` at a YAML file:

    package_types:
      - Zip
      - Installer
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Sequence

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_TYPES: tuple[str, ...] = ("Zip",)
PACKAGE_TYPES_FILE_ENV = "PACKAGE_DESCRIPTOR_TYPES_FILE"


class SettingsError(ValueError):
    pass


def check_package_type_names(names: Sequence[str]) -> None:
    """Raise ValueError unless `names` are non-empty, unique, public identifiers."""
    if not names:
        raise ValueError("At least one package type must be declared.")
    for name in names:
        if not name.isidentifier() or name.startswith("_"):
            raise ValueError(f"Invalid package type name: {name!r}")
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate package type names: {list(names)}")


def load_package_type_names(settings_path: str | Path) -> tuple[str, ...]:
    """
    Read declared package type names from a YAML settings file.

    The file must be a mapping with a non-empty `package_types` list of strings.
    """
    path = Path(settings_path)
    if not path.exists():
        raise SettingsError(f"Package type settings file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Package type settings file is not valid YAML: {path}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Package type settings must be a mapping at the top level: {path}")

    raw = data.get("package_types")
    if not isinstance(raw, list) or not raw:
        raise SettingsError(f"`package_types` must be a non-empty list: {path}")
    if not all(isinstance(name, str) for name in raw):
        raise SettingsError(f"`package_types` entries must be strings: {path}")

    names = tuple(name.strip() for name in raw)
    try:
        check_package_type_names(names)
    except ValueError as e:
        raise SettingsError(f"{e} ({path})") from e
    logger.info("Loaded %d package type(s) from %s", len(names), path)
    return names


def resolve_package_type_names(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    env = os.environ if environ is None else environ
    settings_path = env.get(PACKAGE_TYPES_FILE_ENV, "").strip()
    if not settings_path:
        return DEFAULT_PACKAGE_TYPES
    return load_package_type_names(settings_path)
