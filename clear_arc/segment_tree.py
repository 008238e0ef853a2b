"""
Clear-segment tree: incremental complement of covered sub-segments on the
cyclic unit domain, plus the largest-clear-arc query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Literal, Union

logger = logging.getLogger(__name__)

DOMAIN_MIN = 0.0
DOMAIN_MAX = 1.0

OverlapKind = Literal['disjoint', 'touch', 'left_trim', 'right_trim', 'split', 'subsume']


@dataclass(frozen=True)
class Segment:
    """
    A clear sub-segment ``[x1, x2]`` of the unit domain.

    Attributes:
        x1: Left bound
        x2: Right bound, strictly greater than x1

    Raises:
        ValueError: If the bounds do not satisfy 0 <= x1 < x2 <= 1
    """
    x1: float
    x2: float

    def __post_init__(self) -> None:
        if not (DOMAIN_MIN <= self.x1 < self.x2 <= DOMAIN_MAX):
            raise ValueError(
                f"Segment bounds must satisfy 0 <= x1 < x2 <= 1, got ({self.x1}, {self.x2})"
            )

    @property
    def length(self) -> float:
        return self.x2 - self.x1

    def overlaps(self, a: float, b: float) -> bool:
        """True if ``[a, b]`` shares more than a single point with this segment."""
        return self.x1 < b and a < self.x2


@dataclass(eq=False)
class Leaf:
    """Tree vertex holding one currently-clear sub-segment."""
    segment: Segment


@dataclass(eq=False)
class Internal:
    """
    Tree vertex with exactly two children, left before right in domain order.

    ``segment`` is the bounding span of the leaves below; it is only read by
    the parent when deciding whether to descend.
    """
    segment: Segment
    left: Node
    right: Node


Node = Union[Leaf, Internal]


@dataclass(frozen=True)
class ClearArc:
    """
    Largest clear arc found by the query.

    Attributes:
        start: Start of the arc
        end: End of the arc; smaller than ``start`` when the arc crosses the 0/1 join
        length: Arc length (0.0 when no clear area remains)
    """
    start: float
    end: float
    length: float

    @property
    def wraps(self) -> bool:
        """True if the arc passes through the 0/1 join point."""
        return self.start > self.end

    def as_tuple(self) -> tuple[float, float]:
        return (self.start, self.end)

    def __bool__(self) -> bool:
        """Returns True if the arc has non-zero length."""
        return self.length > 0.0


def classify_overlap(a: float, b: float, segment: Segment) -> OverlapKind:
    """
    Classify how the closed covering range ``[a, b]`` relates to a segment.

    Parameters:
        a: Left bound of the covering range
        b: Right bound of the covering range, a < b
        segment: Segment ``[s1, s2]`` being tested

    Returns:
        One of:
            'subsume'    a <= s1 and s2 <= b
            'left_trim'  a <= s1 < b < s2
            'right_trim' s1 < a < s2 <= b
            'split'      s1 < a and b < s2
            'touch'      the ranges share exactly one endpoint
            'disjoint'   no common point
    """
    s1, s2 = segment.x1, segment.x2
    if b < s1 or a > s2:
        return 'disjoint'
    if b == s1 or a == s2:
        return 'touch'
    if a <= s1:
        return 'subsume' if s2 <= b else 'left_trim'
    if s2 <= b:
        return 'right_trim'
    return 'split'


def _span(left: Node, right: Node) -> Segment:
    return Segment(left.segment.x1, right.segment.x2)


def _cover_local(node: Node, kind: OverlapKind, a: float, b: float) -> Node | None:
    """Apply a cover that needs no descent: no-op, subsume or a leaf change."""
    if kind in ('disjoint', 'touch'):
        return node

    if kind == 'subsume':
        logger.debug("cover [%s, %s] subsumes %s", a, b, node.segment)
        return None

    s1, s2 = node.segment.x1, node.segment.x2
    if kind == 'left_trim':
        logger.debug("left-trim [%s, %s] -> [%s, %s]", s1, s2, b, s2)
        node.segment = Segment(b, s2)
        return node
    if kind == 'right_trim':
        logger.debug("right-trim [%s, %s] -> [%s, %s]", s1, s2, s1, a)
        node.segment = Segment(s1, a)
        return node
    logger.debug("split [%s, %s] -> [%s, %s] + [%s, %s]", s1, s2, s1, a, b, s2)
    return Internal(
        segment=node.segment,
        left=Leaf(Segment(s1, a)),
        right=Leaf(Segment(b, s2)),
    )


def _rejoin(node: Internal, left: Node | None, right: Node | None) -> Node | None:
    """Reattach covered children to ``node``, splicing it out if one vanished."""
    if left is None and right is None:
        return None
    if left is None:
        logger.debug("splice out %s, keeping right child %s", node.segment, right.segment)
        return right
    if right is None:
        logger.debug("splice out %s, keeping left child %s", node.segment, left.segment)
        return left

    node.left = left
    node.right = right
    node.segment = _span(left, right)
    return node


def _cover_node(node: Node, a: float, b: float) -> Node | None:
    """
    Remove ``[a, b]`` from the subtree rooted at ``node``.

    Returns the node that must take ``node``'s place in its parent, or None
    when the whole subtree has been covered.

    Sorted input builds spines as deep as the record count, so the walk uses
    an explicit stack. Children are visited left before right and their
    replacements collected on ``results`` until the parent frame comes back
    round to rejoin them.
    """
    results: list[Node | None] = []
    stack: list[tuple[Node, bool]] = [(node, False)]

    while stack:
        current, children_done = stack.pop()

        if children_done:
            assert isinstance(current, Internal)
            right = results.pop()
            left = results.pop()
            results.append(_rejoin(current, left, right))
            continue

        kind = classify_overlap(a, b, current.segment)
        if isinstance(current, Internal) and kind in ('left_trim', 'right_trim', 'split'):
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
        else:
            results.append(_cover_local(current, kind, a, b))

    return results.pop()


class ClearSegmentTree:
    """
    Binary tree whose leaves partition the still-clear part of the unit domain.

    The tree starts as a single leaf ``[0, 1]``. Each :meth:`cover` call removes
    a closed sub-range; the domain only ever shrinks. Once nothing is clear the
    root becomes None and further covers are no-ops.

    Example:
        >>> tree = ClearSegmentTree()
        >>> tree.cover(0.2, 0.5)
        >>> tree.cover(0.6, 0.9)
        >>> arc = tree.largest_clear_arc()
        >>> arc.wraps
        True
    """

    def __init__(self) -> None:
        self.root: Node | None = Leaf(Segment(DOMAIN_MIN, DOMAIN_MAX))

    @property
    def is_empty(self) -> bool:
        """True once the whole domain has been covered."""
        return self.root is None

    def cover(self, a: float, b: float) -> None:
        """
        Mark the closed range ``[a, b]`` as no longer clear.

        Parameters:
            a: Left bound, 0 <= a
            b: Right bound, a < b <= 1

        Raises:
            ValueError: If the range is empty, reversed or outside [0, 1]
        """
        a = float(a)
        b = float(b)
        if not (DOMAIN_MIN <= a < b <= DOMAIN_MAX):
            raise ValueError(f"Covering range must satisfy 0 <= a < b <= 1, got ({a}, {b})")
        if self.root is None:
            return
        self.root = _cover_node(self.root, a, b)
        if self.root is None:
            logger.debug("clear area exhausted")

    def leaves(self) -> Iterator[Segment]:
        """Yield the clear segments in increasing domain order."""
        stack: list[Node] = [] if self.root is None else [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield node.segment
            else:
                stack.append(node.right)
                stack.append(node.left)

    def __iter__(self) -> Iterator[Segment]:
        return self.leaves()

    def __len__(self) -> int:
        return sum(1 for _ in self.leaves())

    @property
    def clear_length(self) -> float:
        """Total length of the clear area."""
        return sum(segment.length for segment in self.leaves())

    @property
    def depth(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        if self.root is None:
            return 0
        deepest = 0
        stack: list[tuple[Node, int]] = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            if isinstance(node, Internal):
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return deepest

    def largest_clear_arc(self) -> ClearArc:
        """
        Find the longest clear arc, allowing it to wrap through the 0/1 join.

        The leaves touching 0 and 1 are the two halves of a potential
        wrap-around arc; they are fused when together they beat the largest
        single leaf.

        Returns:
            ClearArc; ``(0, 0)`` with length 0 when nothing is clear
        """
        if self.root is None:
            return ClearArc(DOMAIN_MIN, DOMAIN_MIN, 0.0)

        largest: Segment | None = None
        leftmost: Segment | None = None
        rightmost: Segment | None = None

        for segment in self.leaves():
            if largest is None or segment.length > largest.length:
                largest = segment
            if leftmost is None or segment.x1 < leftmost.x1:
                leftmost = segment
            if rightmost is None or segment.x2 > rightmost.x2:
                rightmost = segment

        assert largest is not None and leftmost is not None and rightmost is not None

        if (
            leftmost is not rightmost
            and leftmost.x1 == DOMAIN_MIN
            and rightmost.x2 == DOMAIN_MAX
        ):
            wrap_length = leftmost.length + rightmost.length
            if wrap_length > largest.length:
                return ClearArc(rightmost.x1, leftmost.x2, wrap_length)

        return ClearArc(largest.x1, largest.x2, largest.length)

    def __repr__(self) -> str:
        bounds = ", ".join(f"[{s.x1:g}, {s.x2:g}]" for s in self.leaves())
        return f"ClearSegmentTree({bounds})"
