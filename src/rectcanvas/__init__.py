"""Rectcanvas - Analyze axis-aligned rectangles placed on a bounded canvas.

Rectcanvas reads rectangle definitions (one ``name x y width height`` line
each), keeps those lying entirely inside the canvas, and reports which of them
overlap nothing, which are completely included in another rectangle, and how
much of the canvas is left uncovered.

Example:
    $ rectcanvas input.txt --width 10 --height 10
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
