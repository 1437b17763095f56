"""Regular lattice construction."""
import numpy as np
from ..interfaces import Lattice


def grid_index(i, j, resolution: int):
    """Row-major flat index of lattice vertex (i, j).

    Assumes 0 <= i, j < resolution; works element-wise on integer arrays.
    """
    return i * resolution + j


def build_lattice(resolution: int, box_size: float) -> Lattice:
    """
    Allocate a flat N x N lattice centered on the origin.

    Vertex (i, j) sits at x = step*i - S/2, y = step*j - S/2, z = 0 with
    step = S/N, so the far edge stops one step short of +S/2.

    Args:
        resolution: Vertices per side (N)
        box_size: Domain side length (S)

    Returns:
        Lattice with N*N vertices
    """
    step = box_size / resolution
    coords = step * np.arange(resolution, dtype=np.float64) - box_size * 0.5

    # indexing='ij' keeps i as the outer (row) index
    X, Y = np.meshgrid(coords, coords, indexing='ij')
    positions = np.stack(
        [X.ravel(), Y.ravel(), np.zeros(resolution * resolution)], axis=1
    )
    return Lattice(resolution=resolution, box_size=float(box_size), positions=positions)
