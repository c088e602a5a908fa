"""
Planar distance between two coordinates.

Assumption
----------
Latitude and longitude are treated as plain Cartesian axes.  Over the
short ranges a dispatcher compares (a few hundred metres) the ranking of
candidates is the same as with great-circle distance, and ranking is all
the matcher needs.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Location


def euclidean_distance(a: Location, b: Location) -> float:
    """Return ``sqrt(dlat**2 + dlng**2)`` between two locations."""
    dlat = a.latitude - b.latitude
    dlng = a.longitude - b.longitude
    return math.sqrt(dlat * dlat + dlng * dlng)
