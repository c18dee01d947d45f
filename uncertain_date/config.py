"""Configuration loading for uncertain date formatting."""

from __future__ import annotations

import os
from dataclasses import dataclass

from uncertain_date.formatting import DateStyle


_DEFAULT_STYLE = DateStyle.DOTTED


@dataclass(frozen=True)
class FormatConfig:
    default_style: DateStyle


def _parse_style(value: str | None, default: DateStyle) -> DateStyle:
    if value is None or not value.strip():
        return default
    try:
        return DateStyle(value.strip().lower())
    except ValueError:
        return default


def load_format_config() -> FormatConfig:
    """Load formatting configuration from environment variables.

    UNCERTAIN_DATE_STYLE selects the style used by format_date() when no
    style is passed: "dotted" (default) or "iso".
    """
    return FormatConfig(
        default_style=_parse_style(os.getenv("UNCERTAIN_DATE_STYLE"), _DEFAULT_STYLE),
    )
