"""
Directional Deposition

Builds dune-like ridges by repeatedly lifting the lattice on one side of a
random line (a "slice") and lowering it on the other, with a smooth falloff
and a magnitude that decays from slice to slice.
"""
import logging
from typing import Tuple
import numpy as np

from ..interfaces import Lattice
from ..random_source import RandomSource

logger = logging.getLogger(__name__)

NEGATIVE_SIDE_POLICIES = ("mirror", "skip")


def falloff(r: np.ndarray, radius: float) -> np.ndarray:
    """Smooth bump (1 - (r/R)^2)^2 inside the radius, zero outside."""
    r = np.asarray(r, dtype=np.float64)
    g = (1.0 - (r / radius) ** 2) ** 2
    return np.where(r < radius, g, 0.0)


def apply_slice(
    lattice: Lattice,
    pivot: Tuple[float, float],
    theta: float,
    magnitude: float,
    radius: float,
    negative_side: str = "mirror",
) -> None:
    """
    Apply one deposition slice to the lattice heights in place.

    The slice line passes through ``pivot`` with normal direction
    d = (cos theta, sin theta). For each vertex, t = d . (v - pivot) is its
    signed offset from the line and r = sqrt(|t|) drives the falloff.

    Policies for vertices with t < 0 (where sqrt(t) has no real value):
      - "mirror": lowered by the same falloff as the positive side
      - "skip": left untouched
    Vertices exactly on the line (t == 0) never change.

    Args:
        lattice: Lattice to modify
        pivot: (x, y) point on the slice line
        theta: Direction angle in radians
        magnitude: Height delta at the line
        radius: Falloff radius in sqrt-offset units
        negative_side: "mirror" or "skip"
    """
    if negative_side not in NEGATIVE_SIDE_POLICIES:
        raise ValueError(f"Unknown negative_side policy: {negative_side}")

    direction = np.array([np.cos(theta), np.sin(theta)])
    t = (lattice.positions[:, :2] - np.asarray(pivot, dtype=np.float64)) @ direction

    r = np.sqrt(np.abs(t))
    delta = magnitude * falloff(r, radius)

    if negative_side == "mirror":
        lattice.heights[:] += np.sign(t) * delta
    else:
        lattice.heights[:] += np.where(t > 0, delta, 0.0)


def deposit_slices(
    lattice: Lattice,
    n_slices: int,
    magnitude: float,
    radius: float,
    random_source: RandomSource,
    decay: float = 0.99,
    negative_side: str = "mirror",
) -> float:
    """
    Perturb the lattice with a sequence of random slices.

    Each slice decays the magnitude first, then draws pivot x, pivot y and
    the angle (in that order) from ``random_source``.

    Args:
        lattice: Lattice to modify in place
        n_slices: Number of slices (K)
        magnitude: Initial magnitude before the first decay
        radius: Falloff radius
        random_source: Callable returning uniform floats in [0, 1)
        decay: Per-slice magnitude multiplier
        negative_side: Policy passed to apply_slice

    Returns:
        Magnitude after the last slice
    """
    size = lattice.box_size

    for _ in range(n_slices):
        magnitude *= decay
        px = random_source() * size - size * 0.5
        py = random_source() * size - size * 0.5
        theta = random_source() * 2.0 * np.pi
        apply_slice(lattice, (px, py), theta, magnitude, radius, negative_side)

    logger.debug(f"Applied {n_slices} deposition slices (final magnitude {magnitude:.4g})")
    return magnitude
