"""
Nearest-Driver Matching
=======================

Brute-force scan over the registered fleet:

1. Skip drivers that are not available.
2. Compute the Euclidean distance from the rider to each candidate.
3. Keep the strictly smallest distance seen so far.

Ties go to the driver encountered first, so the result is stable with
respect to registration order.  There is no secondary key.

Complexity
----------
O(n) per request for n registered drivers.  No spatial index is used;
the fleets this service handles are small enough that a flat scan is
cheaper than maintaining one.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .distance import euclidean_distance
from .entities import Driver, Location


def find_nearest_driver(
    location: Location, drivers: Iterable[Driver]
) -> Optional[Driver]:
    """Return the closest available driver to *location*, or ``None``."""
    nearest: Optional[Driver] = None
    min_distance = math.inf

    for driver in drivers:
        if not driver.is_available:
            continue
        distance = euclidean_distance(location, driver.location)
        if distance < min_distance:
            min_distance = distance
            nearest = driver

    return nearest
