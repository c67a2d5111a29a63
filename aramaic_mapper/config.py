"""Loading of writing systems and settings from YAML."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from aramaic_mapper.errors import WritingConfigError
from aramaic_mapper.mapper import MapCallback, Mapper
from aramaic_mapper.models import Category, Writing
from aramaic_mapper.utils.log import log_with_context
from aramaic_mapper.utils.schema import validate_writing


logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "format": "pretty",
        "file": None,
    },
    "mapper": {
        "strict": False,
    },
}


def _read_yaml(path: Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise WritingConfigError(f"File not found: {path}")

    with path.open(encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise WritingConfigError(f"Invalid YAML in {path}: {e}") from e


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None and isinstance(merged.get(key), dict):
            # Empty section in YAML: keep the defaults
            continue
        if isinstance(merged.get(key), dict):
            if not isinstance(value, dict):
                raise WritingConfigError(
                    f"Settings section '{key}' must be a mapping, got {type(value).__name__}"
                )
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings, falling back to defaults for anything not set.

    Args:
        path: Optional settings.yaml path

    Returns:
        Settings dict
    """
    if path is None:
        return copy.deepcopy(DEFAULT_SETTINGS)

    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise WritingConfigError(f"Settings in {path} must be a mapping")
    return _merge(DEFAULT_SETTINGS, data)


def writing_from_dict(data: Any, name: str = "writing") -> Writing:
    """
    Build a writing system from its parsed definition.

    Args:
        data: Definition with consonants, vowels and optional diacritics,
            punctuation and other lists
        name: Name used in error messages

    Returns:
        Writing system
    """
    errors = validate_writing(data)
    if errors:
        raise WritingConfigError(f"Invalid writing '{name}': " + "; ".join(errors))

    return Writing(**{cat.value: data.get(cat.value) for cat in Category})


def load_writings(path: Path) -> dict[str, Writing]:
    """
    Load named writing systems from a YAML file.

    The file holds a ``writings`` mapping from name to definition::

        writings:
          sedra:
            consonants: [A, B, G, ...]
            vowels: [a, o, e, i, u]

    Args:
        path: Path to YAML file

    Returns:
        Writing systems by name
    """
    data = _read_yaml(path)
    if not isinstance(data, dict) or not isinstance(data.get("writings"), dict):
        raise WritingConfigError(f"No 'writings' mapping found in {path}")

    writings = {
        str(name): writing_from_dict(definition, str(name))
        for name, definition in data["writings"].items()
    }
    log_with_context(
        logger, "info", "Loaded writing systems", path=str(path), writings=sorted(writings)
    )
    return writings


def build_mapper(
    writings: dict[str, Writing],
    from_name: str,
    to_name: str,
    map_callback: MapCallback | None = None,
    settings: dict[str, Any] | None = None,
) -> Mapper:
    """
    Build a mapper between two named writing systems.

    Args:
        writings: Writing systems by name
        from_name: Source writing name
        to_name: Destination writing name
        map_callback: Optional custom mapping callback
        settings: Settings dict; ``mapper.strict`` turns on pair validation

    Returns:
        Mapper
    """
    settings = settings if settings is not None else load_settings()

    missing = [name for name in (from_name, to_name) if name not in writings]
    if missing:
        raise WritingConfigError(
            f"Unknown writing system(s): {', '.join(missing)}. "
            f"Available: {', '.join(sorted(writings))}"
        )

    strict = bool((settings.get("mapper") or {}).get("strict", False))
    logger.debug(f"Building mapper {from_name} -> {to_name} (strict={strict})")
    return Mapper(writings[from_name], writings[to_name], map_callback, strict=strict)
