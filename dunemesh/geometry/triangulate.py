"""Lattice triangulation."""
import numpy as np
from ..terrain.grid import grid_index


def triangulate_grid(resolution: int) -> np.ndarray:
    """
    Split every lattice cell into two triangles.

    For cell (i, j) the triangles are
        A = (v(i, j),   v(i+1, j), v(i, j+1))
        B = (v(i, j+1), v(i+1, j), v(i+1, j+1))
    emitted A then B, cells in row-major order. Both wind the same way, so
    on a flat lattice their face normals point to +z.

    Args:
        resolution: Vertices per lattice side (N)

    Returns:
        (2*(N-1)^2, 3) uint32 array of vertex indices
    """
    cells = max(resolution - 1, 0)
    i, j = np.mgrid[0:cells, 0:cells]
    i = i.ravel()
    j = j.ravel()

    v00 = grid_index(i, j, resolution)
    v10 = grid_index(i + 1, j, resolution)
    v01 = grid_index(i, j + 1, resolution)
    v11 = grid_index(i + 1, j + 1, resolution)

    tri_a = np.stack([v00, v10, v01], axis=1)
    tri_b = np.stack([v01, v10, v11], axis=1)

    # Interleave so each cell's pair stays adjacent
    faces = np.empty((2 * len(v00), 3), dtype=np.uint32)
    faces[0::2] = tri_a
    faces[1::2] = tri_b
    return faces
