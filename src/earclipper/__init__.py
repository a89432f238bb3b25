"""earclipper - Triangulate simple polygons by ear clipping.

earclipper decomposes a simple, hole-free 2D polygon into non-overlapping
triangles that exactly cover its area. The core is a classic ear-clipping
triangulator with collinearity pruning; around it sit a JSON polygon file
format, a parallel batch processor and a CLI.

Example:
    $ earclipper triangulate shapes.json

This will create shapes-triangles.json with one triangle list per polygon.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
