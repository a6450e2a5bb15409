"""Bounds of all objects going into one document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

from svg_serializer.geometry.measurements import Bounds, measure_bounds

logger = logging.getLogger(__name__)

# Reduction seed for several objects. The origin ends up inside the
# aggregate even when no object touches it.
SEED_BOUNDS: Bounds = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def get_bounds(objects: Sequence[Any]) -> Optional[Bounds]:
    """Bounds of the given objects, or None when there are none.

    A single object keeps its own bounds. Several objects are reduced
    coordinate-wise starting from SEED_BOUNDS.
    """
    if not objects:
        return None

    all_bounds = measure_bounds(*objects)
    if len(all_bounds) == 1:
        return all_bounds[0]

    low, high = SEED_BOUNDS
    for lower, upper in all_bounds:
        low = (min(low[0], lower[0]), min(low[1], lower[1]), min(low[2], lower[2]))
        high = (max(high[0], upper[0]), max(high[1], upper[1]), max(high[2], upper[2]))
    logger.debug("Aggregated bounds of %d objects: %s %s", len(all_bounds), low, high)
    return (low, high)
