"""
Largest Clear Arc
=================

Public API for finding the largest arc of the cyclic unit domain that is not
covered by a sequence of (possibly wrap-around) sub-segments.
"""

from clear_arc.api import find_largest_clear_arc, ClearArcResult
from clear_arc.segment_tree import (
    ClearSegmentTree,
    ClearArc,
    Segment,
    Leaf,
    Internal,
    classify_overlap,
)
from clear_arc.records import (
    ValidationError,
    validate_record,
    split_record,
    iter_cover_ranges,
    load_records,
)
from clear_arc.debug import (
    format_arc,
    format_segment,
    log_cover,
    log_leaves,
    log_result,
    setup_debug_logging,
    disable_debug_logging,
)

__all__ = [
    # Main API
    'find_largest_clear_arc',
    'ClearArcResult',
    # Tree
    'ClearSegmentTree',
    'ClearArc',
    'Segment',
    'Leaf',
    'Internal',
    'classify_overlap',
    # Records
    'ValidationError',
    'validate_record',
    'split_record',
    'iter_cover_ranges',
    'load_records',
    # Debug utilities
    'format_arc',
    'format_segment',
    'log_cover',
    'log_leaves',
    'log_result',
    'setup_debug_logging',
    'disable_debug_logging',
]
__version__ = '0.1.0'
