"""
Debug logging utilities for inspecting tree updates and query results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional, Union

from clear_arc.segment_tree import ClearArc, ClearSegmentTree, Segment

if TYPE_CHECKING:
    from clear_arc.api import ClearArcResult

LOGGER_NAME = 'clear_arc'
LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_debug_logging(level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling it again only updates the level.

    Parameters:
        level: Logging level for the package logger

    Returns:
        The package logger
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def disable_debug_logging() -> None:
    """Remove the handler added by setup_debug_logging()."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)


def format_bound(value: float, precision: int = 6) -> str:
    return f"{value:.{precision}f}"


def format_segment(segment: Segment, precision: int = 6) -> str:
    return f"[{format_bound(segment.x1, precision)}, {format_bound(segment.x2, precision)}]"


def format_arc(arc: Union[ClearArc, ClearArcResult], precision: int = 6) -> str:
    """Format an arc as ``start end`` with a marker when it wraps."""
    text = f"{format_bound(arc.start, precision)} {format_bound(arc.end, precision)}"
    return f"{text} (wraps)" if arc.wraps else text


def log_cover(a: float, b: float, tree: ClearSegmentTree, logger: Optional[logging.Logger] = None) -> None:
    """Log a cover call and the clear length remaining afterwards."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    logger.debug(f"cover [{a:g}, {b:g}]: {len(tree)} leaves, clear length {tree.clear_length:.6f}")


def log_leaves(segments: Iterable[Segment], logger: Optional[logging.Logger] = None) -> None:
    logger = logger or logging.getLogger(LOGGER_NAME)
    for i, segment in enumerate(segments):
        logger.debug(f"  leaf {i}: {format_segment(segment)} length {segment.length:.6f}")


def log_result(arc: Union[ClearArc, ClearArcResult], logger: Optional[logging.Logger] = None) -> None:
    """Log a tree query arc or an API result; both expose start, end, length and wraps."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    if not arc:
        logger.info("No clear arc: domain fully covered")
        return
    logger.info(f"Largest clear arc: {format_arc(arc)} length {arc.length:.6f}")
