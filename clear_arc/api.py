"""
Public API for finding the largest clear arc left by a sequence of records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from clear_arc.debug import log_cover, log_leaves
from clear_arc.records import iter_cover_ranges
from clear_arc.segment_tree import ClearSegmentTree

logger = logging.getLogger(__name__)


@dataclass
class ClearArcResult:
    """
    Result of a largest-clear-arc computation.

    Attributes:
        start: Start of the largest clear arc
        end: End of the arc (smaller than start when the arc wraps through 0/1)
        length: Arc length; 0.0 when the domain is fully covered
        wraps: True if the arc crosses the 0/1 join point
        records_used: Number of records applied before the computation stopped
        covered_fully: True if no clear area remains
        leaves: Optional list of (x1, x2) clear segments left at the end
    """
    start: float
    end: float
    length: float
    wraps: bool
    records_used: int
    covered_fully: bool
    leaves: Optional[List[Tuple[float, float]]] = None

    def __bool__(self) -> bool:
        """Returns True if a clear arc exists."""
        return self.length > 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.start, self.end)


def find_largest_clear_arc(
    records: Any,
    stop_when_covered: bool = True,
    return_leaves: bool = False
) -> ClearArcResult:
    """
    Find the largest arc of the cyclic unit domain not covered by any record.

    Each record ``(x1, x2)`` covers ``[x1, x2]`` when ``x1 < x2`` and wraps
    through the 0/1 join when ``x1 > x2``.

    Parameters:
        records: Array-like of shape (N, 2) with values in [0, 1]; may be empty
        stop_when_covered: Stop reading records once nothing is clear
        return_leaves: If True, include the remaining clear segments in the result

    Returns:
        ClearArcResult describing the largest clear arc

    Raises:
        ValidationError: If records are malformed, out of [0, 1] or zero-length

    Example:
        >>> result = find_largest_clear_arc([(0.2, 0.5), (0.6, 0.9)])
        >>> result.wraps, round(result.length, 6)
        (True, 0.3)
    """
    tree = ClearSegmentTree()
    records_used = 0

    # Records are validated lazily, so those after an early stop are never checked
    for index, ranges in iter_cover_ranges(records):
        for a, b in ranges:
            tree.cover(a, b)
            if logger.isEnabledFor(logging.DEBUG):
                log_cover(a, b, tree, logger)
        records_used = index + 1
        if stop_when_covered and tree.is_empty:
            logger.debug(f"Domain fully covered after {records_used} records, stopping")
            break

    if logger.isEnabledFor(logging.DEBUG):
        log_leaves(tree.leaves(), logger)

    arc = tree.largest_clear_arc()
    logger.info(
        f"Largest clear arc ({arc.start:g}, {arc.end:g}) length {arc.length:g} "
        f"after {records_used} records"
    )

    return ClearArcResult(
        start=arc.start,
        end=arc.end,
        length=arc.length,
        wraps=arc.wraps,
        records_used=records_used,
        covered_fully=tree.is_empty,
        leaves=[(s.x1, s.x2) for s in tree.leaves()] if return_leaves else None
    )
