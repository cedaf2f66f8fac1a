"""Typed settings for chronal parsers.

This module wraps the parser configuration (enabled languages and rule
options) in Pydantic models so the CLI and embedding applications can rely
on validated settings loaded from a JSON file, with environment overrides.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from chronal.errors import InvalidConfigError
from chronal.parser import Parser, for_languages
from chronal.rules.base import Options

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".chronal" / "config.json"


class ParserSettings(BaseModel):
    """Root configuration state."""

    languages: List[str] = Field(default_factory=lambda: ["en"], description="Rule catalogs, in order")
    options: Options = Field(default_factory=Options)

    @field_validator("languages")
    def _validate_languages(cls, value: List[str]) -> List[str]:
        languages = [code.strip().lower() for code in value if code.strip()]
        if not languages:
            raise ValueError("languages must name at least one catalog")
        return languages


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> ParserSettings:
    """Load settings from disk or raise if invalid."""

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return ParserSettings.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise InvalidConfigError(
            f"Invalid configuration in {path}: {exc}",
            details={"path": str(path)},
        ) from exc


def save_settings(settings: ParserSettings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    payload = settings.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.debug(f"Saved settings to {path}")


def resolve_settings(
    path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ParserSettings:
    """Effective settings: file (or defaults), then overrides, then environment.

    Args:
        path: Settings file; a missing file means defaults
        overrides: Explicit values, e.g. ``{"options": {"distance": 3}}``

    Raises:
        InvalidConfigError: The file or the merged values do not validate
    """
    path = path or DEFAULT_CONFIG_PATH
    settings = load_settings(path) if path.exists() else ParserSettings()

    merged = settings.model_dump(mode="python")
    merged = _apply_overrides(merged, overrides or {})
    merged = _apply_env_overrides(merged)

    try:
        return ParserSettings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def build_parser(settings: Optional[ParserSettings] = None) -> Parser:
    """Create a parser from ``settings`` (defaults when omitted)."""
    settings = settings or ParserSettings()
    return for_languages(settings.languages, settings.options)


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = base.copy()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _apply_overrides(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    options = data.setdefault("options", {})
    _set_env_override(options, "distance", "CHRONAL_DISTANCE", cast_int=True)
    _set_env_override(options, "match_by_order", "CHRONAL_MATCH_BY_ORDER", cast_bool=True)

    languages = os.getenv("CHRONAL_LANGUAGES")
    if languages is not None:
        data["languages"] = [code for code in languages.split(",") if code.strip()]
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
    cast_int: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    elif cast_int:
        try:
            mapping[key] = int(raw)
        except ValueError as exc:
            raise InvalidConfigError(
                f"{env_name} must be an integer, got {raw!r}",
                details={"variable": env_name},
            ) from exc
    else:
        mapping[key] = raw
