"""Configuration loading utilities for chronal."""

from .settings import (
    DEFAULT_CONFIG_PATH,
    ParserSettings,
    build_parser,
    load_settings,
    resolve_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ParserSettings",
    "build_parser",
    "load_settings",
    "resolve_settings",
    "save_settings",
]
