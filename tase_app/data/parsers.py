"""
Parsers for raw bar payloads.

Upstream market-data clients deliver bars as mappings with the keys
``timestamp, open, high, low, close, volume``. Parsing only converts types;
structural checks belong to the validator.
"""

import math
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional

from ..errors import InvalidInputError
from .models import Bar, Timestamp

PRICE_FIELDS = ("open", "high", "low", "close")


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def parse_timestamp(value: Any) -> Optional[Timestamp]:
    """
    Normalize a bar timestamp.

    ISO-8601 strings (including a trailing ``Z``) become timezone-aware
    datetimes; epoch numbers and datetimes pass through unchanged.
    """
    if value is None or isinstance(value, datetime):
        return value

    if _is_real_number(value):
        return value

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidInputError(f"Unparseable bar timestamp: {value!r}") from e
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    raise InvalidInputError(f"Unsupported bar timestamp type: {type(value).__name__}")


def parse_bar(raw: Any, index: int = 0) -> Bar:
    """
    Convert a raw bar payload into a Bar.

    Args:
        raw: Bar instance or mapping with OHLCV keys
        index: Position of the bar in its series, used in error messages

    Returns:
        Parsed Bar

    Raises:
        InvalidInputError: If the payload is not a bar or a field is not numeric
    """
    if isinstance(raw, Bar):
        values = {name: getattr(raw, name) for name in PRICE_FIELDS}
        volume = raw.volume
        timestamp = raw.timestamp
    elif isinstance(raw, Mapping):
        values = {name: raw.get(name) for name in PRICE_FIELDS}
        volume = raw.get("volume")
        timestamp = raw.get("timestamp")
    else:
        raise InvalidInputError(
            f"Bar {index} must be a Bar or mapping, got {type(raw).__name__}",
            bar_index=index
        )

    for name, value in values.items():
        if not _is_real_number(value):
            raise InvalidInputError(
                f"Bar {index} field '{name}' must be a finite number, got {value!r}",
                bar_index=index
            )

    if volume is None:
        volume = 0.0
    elif not _is_real_number(volume):
        raise InvalidInputError(
            f"Bar {index} field 'volume' must be a finite number, got {volume!r}",
            bar_index=index
        )

    if isinstance(raw, Bar):
        return raw if raw.volume is not None else replace(raw, volume=0.0)

    try:
        parsed_ts = parse_timestamp(timestamp)
    except InvalidInputError as e:
        raise InvalidInputError(f"Bar {index}: {e}", bar_index=index) from e

    return Bar(
        timestamp=parsed_ts,
        open=float(values["open"]),
        high=float(values["high"]),
        low=float(values["low"]),
        close=float(values["close"]),
        volume=float(volume),
    )
