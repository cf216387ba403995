"""Input validation for the timeglance command line.

Values arrive as raw argument strings; each validator returns the converted
value or raises ``ValidationError`` with a message fit for the user.
"""

from __future__ import annotations

from typing import Iterable

from timeglance.instant import MAX_EPOCH_MILLIS, MIN_EPOCH_MILLIS

from .config import config


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def validate_epoch_millis(value: str, name: str = "Timestamp") -> int:
    """Validate an epoch-millisecond argument.

    Args:
        value: Raw argument text, an optionally signed integer
        name: Human-readable name for error messages

    Returns:
        The value as an integer

    Raises:
        ValidationError: If the value is not an integer or is out of range
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} cannot be empty")

    text = str(value).strip()
    try:
        millis = int(text)
    except ValueError as e:
        raise ValidationError(f"{name} must be an integer number of milliseconds, got '{text}'") from e

    if not (MIN_EPOCH_MILLIS <= millis <= MAX_EPOCH_MILLIS):
        raise ValidationError(f"{name} must be between {MIN_EPOCH_MILLIS} and {MAX_EPOCH_MILLIS}, got {millis}")

    return millis


def validate_epoch_millis_list(values: Iterable[str]) -> list[int]:
    """Validate every timestamp argument and enforce ``config.max_rows``."""
    values = list(values or [])
    if len(values) > config.max_rows:
        raise ValidationError(f"Too many timestamps: {len(values)} given, at most {config.max_rows} allowed")

    return [validate_epoch_millis(value, f"Timestamp #{index}") for index, value in enumerate(values, start=1)]
