"""Height range normalization."""
import logging
from typing import Tuple
import numpy as np

from ..interfaces import Lattice

logger = logging.getLogger(__name__)


def normalize_heights(lattice: Lattice, max_height: float) -> Tuple[float, float]:
    """
    Rescale the height channel linearly into [0, max_height].

    A collapsed range (all heights equal, e.g. no deposition) has no
    meaningful scale; every height is then set to 0, the bottom of the
    target range.

    Args:
        lattice: Lattice to modify in place
        max_height: Upper bound of the target range (H)

    Returns:
        (z_min, z_max) of the heights before rescaling
    """
    heights = lattice.heights
    if heights.size == 0:
        raise ValueError("Cannot normalize heights of an empty lattice")
    if not np.all(np.isfinite(heights)):
        raise ValueError("Lattice heights contain non-finite values")

    z_min = float(heights.min())
    z_max = float(heights.max())
    z_range = z_max - z_min

    if z_range == 0.0:
        logger.warning(f"Height range collapsed at z={z_min:.4g}; flattening to 0")
        heights[:] = 0.0
    else:
        heights[:] = (heights - z_min) / z_range * max_height

    return z_min, z_max
