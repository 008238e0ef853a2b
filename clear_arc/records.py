"""
Input records: loading, validation and wrap-around splitting.

A record is a pair ``(x1, x2)`` of values in ``[0, 1]``. When ``x1 < x2`` it
names the closed range ``[x1, x2]``; when ``x1 > x2`` it wraps through the
0/1 join and stands for ``[0, x2]`` plus ``[x1, 1]``. ``x1 == x2`` is invalid.

Endpoints meant to sit on the domain boundary must be given as exactly 0 or 1;
no tolerance is applied when comparing against them.
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def _where(index: int | None) -> str:
    return f"record {index}" if index is not None else "record"


def validate_record(x1: Any, x2: Any, index: int | None = None) -> tuple[float, float]:
    """Validate one record and return its bounds as floats.

    Args:
        x1: First value of the record
        x2: Second value of the record
        index: Optional position of the record, used in error messages

    Returns:
        The pair ``(x1, x2)`` converted to float

    Raises:
        ValidationError: If a value is not a finite number in [0, 1]
        ValidationError: If both values are equal
    """
    try:
        v1 = float(x1)
        v2 = float(x2)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{_where(index)}: values must be numbers, got ({x1!r}, {x2!r})") from e

    for value in (v1, v2):
        if not math.isfinite(value) or not (0.0 <= value <= 1.0):
            raise ValidationError(f"{_where(index)}: values must lie in [0, 1], got ({v1}, {v2})")

    if v1 == v2:
        raise ValidationError(f"{_where(index)}: zero-length record ({v1}, {v2})")

    return v1, v2


def split_record(x1: float, x2: float) -> list[tuple[float, float]]:
    """Turn a validated record into the covering ranges it stands for.

    A wrap-around record ``x1 > x2`` yields ``(0, x2)`` and ``(x1, 1)``; a half
    that collapses to a single point (``x2 == 0`` or ``x1 == 1``) is dropped.
    """
    if x1 < x2:
        return [(x1, x2)]
    ranges = []
    if x2 > 0.0:
        ranges.append((0.0, x2))
    if x1 < 1.0:
        ranges.append((x1, 1.0))
    return ranges


def as_record_array(records: Any) -> NDArray[np.float64]:
    """Coerce records to a float64 array of shape (N, 2).

    Raises:
        ValidationError: If the records cannot be read as N pairs of numbers
    """
    try:
        array = np.asarray(records, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Records must be numeric pairs: {e}") from e
    if array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValidationError(f"Records must have shape (N, 2), got {array.shape}")
    return array


def iter_cover_ranges(records: Any) -> Iterator[tuple[int, list[tuple[float, float]]]]:
    """Validate records lazily and yield ``(index, covering_ranges)`` for each.

    Raises:
        ValidationError: On the first invalid record
    """
    array = as_record_array(records)
    for index, (x1, x2) in enumerate(array):
        v1, v2 = validate_record(x1, x2, index)
        yield index, split_record(v1, v2)


def _parse_lines(stream: TextIO) -> list[tuple[float, float]]:
    rows = []
    for line_no, raw in enumerate(stream, start=1):
        fields = raw.split('#', 1)[0].replace(',', ' ').split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValidationError(f"line {line_no}: expected two numbers, got {raw.strip()!r}")
        try:
            rows.append((float(fields[0]), float(fields[1])))
        except ValueError as e:
            raise ValidationError(f"line {line_no}: could not parse {raw.strip()!r}") from e
    return rows


def load_records(source: str | os.PathLike[str] | TextIO) -> NDArray[np.float64]:
    """Read records from a file path or an open text stream.

    Each non-blank line holds two numbers separated by whitespace or a comma.
    Text after ``#`` is ignored.

    Args:
        source: Path to a text file, or a readable text stream

    Returns:
        Array of shape (N, 2), dtype float64; values are not yet validated

    Raises:
        ValidationError: If a line does not hold exactly two numbers; the
            message names the line number in the source
        OSError: If the path cannot be opened
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        logger.info(f"Loading records: {path}")
        with path.open('r', encoding='utf-8') as handle:
            rows = _parse_lines(handle)
    else:
        rows = _parse_lines(source)

    array = np.array(rows, dtype=np.float64).reshape(-1, 2)
    logger.debug(f"Loaded {len(array)} records")
    return array
