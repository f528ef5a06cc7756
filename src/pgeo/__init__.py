"""pgeo - planar computational geometry primitives.

Immutable points, lines, segments, triangles and polygons with exact
orientation, area, intersection and convexity queries.
"""

__version__ = "0.1.0"
