"""Pairwise rectangle intersection.

The overlap of two axis-aligned rectangles is itself an axis-aligned
rectangle, so it is returned as a Rectangle named after both sources.
Rectangles that only share an edge or a corner do not overlap.
"""

from rectcanvas.domain import Rectangle

OVERLAP_NAME_SEPARATOR = "-"


def compute_overlap(a: Rectangle, b: Rectangle) -> Rectangle | None:
    """Compute the intersection of two rectangles.

    Symmetric up to naming: ``compute_overlap(a, b)`` and
    ``compute_overlap(b, a)`` cover the same region.

    Args:
        a: First rectangle
        b: Second rectangle

    Returns:
        Rectangle named ``"<a.name>-<b.name>"`` covering the shared region,
        or None if the shared region has zero width or height

    Examples:
        >>> compute_overlap(Rectangle("A", 0, 0, 4, 4), Rectangle("B", 2, 2, 4, 4))
        Rectangle(name='A-B', x=2, y=2, width=2, height=2)
        >>> compute_overlap(Rectangle("A", 0, 0, 2, 2), Rectangle("B", 2, 0, 2, 2)) is None
        True
    """
    ox = max(a.x, b.x)
    oy = max(a.y, b.y)
    ow = min(a.right, b.right) - ox
    oh = min(a.top, b.top) - oy

    if ow <= 0 or oh <= 0:
        return None

    return Rectangle(
        name=f"{a.name}{OVERLAP_NAME_SEPARATOR}{b.name}",
        x=ox,
        y=oy,
        width=ow,
        height=oh,
    )


def overlaps(a: Rectangle, b: Rectangle) -> bool:
    """Check whether two rectangles share a region of positive area."""
    return compute_overlap(a, b) is not None
