"""
Height Relaxation

Blends each height with the average of its four lattice neighbours to
remove high-frequency noise left by deposition. Border vertices read
themselves in place of missing neighbours (clamped, not wrapped).
"""
import logging
import numpy as np
from scipy import ndimage

from ..interfaces import Lattice

logger = logging.getLogger(__name__)

# 4-neighbour average
_NEIGHBOUR_KERNEL = np.array([
    [0.0, 0.25, 0.0],
    [0.25, 0.0, 0.25],
    [0.0, 0.25, 0.0],
])


def relax_pass(heights: np.ndarray) -> np.ndarray:
    """
    One relaxation pass over an (N, N) height grid.

    All neighbour reads use the input grid, so the result does not depend
    on visiting order.

    Args:
        heights: Height grid [i, j]

    Returns:
        New grid 0.5 * (heights + neighbour_average)
    """
    average = ndimage.convolve(heights, _NEIGHBOUR_KERNEL, mode='nearest')
    return 0.5 * (heights + average)


def relax_heights(lattice: Lattice, passes: int = 5) -> None:
    """Apply ``passes`` relaxation passes to the lattice heights in place.

    Only z is relaxed; x and y stay on the lattice.
    """
    if passes < 0:
        raise ValueError(f"passes must be >= 0, got {passes}")

    grid = lattice.height_grid().copy()
    for _ in range(passes):
        grid = relax_pass(grid)
    lattice.heights[:] = grid.ravel()

    logger.debug(f"Relaxed heights with {passes} passes")
