"""Record (dict / JSON) form of uncertain dates.

Record fields:
    start: ISO date of the first possible day, or None
    end: ISO date of the last possible day, or None
    precision: Informational, one of the Precision values
    text: Informational, the ISO text form

Only start and end are read back; precision and text are derived on output.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from uncertain_date.errors import CalendarError, SerializationError
from uncertain_date.formatting import format_iso
from uncertain_date.uncertain_date import UncertainDate


logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("uncertain_date_schema.json")


@lru_cache(maxsize=1)
def load_schema() -> dict:
    """Load the bundled JSON schema for the record form."""
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def to_dict(value: UncertainDate) -> dict[str, Any]:
    """Convert to a dictionary suitable for JSON serialization."""
    return {
        "start": value.start.isoformat() if value.start else None,
        "end": value.end.isoformat() if value.end else None,
        "precision": value.precision.value,
        "text": format_iso(value),
    }


def validate_uncertain_date_dict(data: Any) -> tuple[bool, list[str] | None]:
    """Validate a record against the uncertain date schema.

    Returns:
        Tuple of (is_valid, errors). errors is None if valid.
    """
    validator = jsonschema.Draft7Validator(load_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if not errors:
        return (True, None)
    return (False, [_describe(e) for e in errors])


def _describe(error: jsonschema.ValidationError) -> str:
    location = ".".join(str(p) for p in error.path)
    return f"{location}: {error.message}" if location else error.message


def _to_date(name: str, value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise CalendarError(f"Invalid {name} date {value!r}: {e}") from e


def from_dict(data: Any) -> UncertainDate:
    """Create an UncertainDate from its record form.

    Raises:
        SerializationError: If the record does not conform to the schema
        NullArgumentError: If only one of start and end is set
        CalendarError: If start or end is not a real calendar date
        RangeError: If the range is reversed or crosses a year boundary
    """
    is_valid, errors = validate_uncertain_date_dict(data)
    if not is_valid:
        logger.warning(f"Rejected uncertain date record: {'; '.join(errors)}")
        raise SerializationError("Record does not conform to the uncertain date schema", errors)

    start, end = data["start"], data["end"]
    if start is None and end is None:
        return UncertainDate.empty()
    return UncertainDate.of_range(
        _to_date("start", start) if start is not None else None,
        _to_date("end", end) if end is not None else None,
    )
