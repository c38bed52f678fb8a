"""Snapshot classifiers built on the overlap engine.

- get_non_overlapping: rectangles that overlap no other rectangle
- get_completely_included: rectangles lying entirely inside another one

Both compare members by snapshot position rather than by value, so two
identical rectangles are still distinct members that overlap (and include)
each other.
"""

import logging
from collections.abc import Sequence

from rectcanvas.core.overlap import compute_overlap
from rectcanvas.domain import Rectangle

logger = logging.getLogger(__name__)


def get_non_overlapping(rectangles: Sequence[Rectangle]) -> list[Rectangle]:
    """Return the rectangles that overlap no other rectangle.

    Every unordered pair is evaluated once; both members of an overlapping
    pair are marked.

    Args:
        rectangles: The snapshot

    Returns:
        Unmarked rectangles in snapshot order
    """
    n = len(rectangles)
    has_overlap = [False] * n

    for i in range(n):
        for j in range(i + 1, n):
            if compute_overlap(rectangles[i], rectangles[j]) is not None:
                has_overlap[i] = True
                has_overlap[j] = True

    result = [rect for rect, marked in zip(rectangles, has_overlap) if not marked]
    logger.debug("Non-overlapping rectangles: %d of %d", len(result), n)
    return result


def is_completely_included(source: Rectangle, target: Rectangle) -> bool:
    """Check whether target lies entirely inside source.

    The overlap is a subset of both rectangles, so if it is as wide and as
    tall as target it must be all of target.

    Args:
        source: Candidate enclosing rectangle
        target: Rectangle being tested

    Returns:
        True if the overlap of source and target has target's dimensions
    """
    overlap = compute_overlap(source, target)
    return (
        overlap is not None
        and overlap.width == target.width
        and overlap.height == target.height
    )


def get_completely_included(rectangles: Sequence[Rectangle]) -> list[Rectangle]:
    """Return the rectangles included in at least one other rectangle.

    Args:
        rectangles: The snapshot

    Returns:
        Included rectangles in snapshot order
    """
    result = [
        target
        for t, target in enumerate(rectangles)
        if any(
            s != t and is_completely_included(source, target)
            for s, source in enumerate(rectangles)
        )
    ]
    logger.debug("Completely included rectangles: %d of %d", len(result), len(rectangles))
    return result
