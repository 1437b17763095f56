"""Packaging of lattice data into the output Mesh."""
import numpy as np

from ..interfaces import Lattice, Mesh


def compute_texcoords(positions: np.ndarray, box_size: float) -> np.ndarray:
    """
    Map planar positions linearly onto [0, 1]^2.

    u = (x + S/2) / S and v = (S/2 - y) / S, so v grows toward -y like
    image rows.

    Args:
        positions: (N, 3) or (N, 2) positions
        box_size: Domain side length (S)

    Returns:
        (N, 2) texture coordinates
    """
    half = box_size * 0.5
    u = (positions[:, 0] + half) / box_size
    v = (half - positions[:, 1]) / box_size
    return np.clip(np.stack([u, v], axis=1), 0.0, 1.0)


def _frozen(array: np.ndarray, dtype) -> np.ndarray:
    out = np.ascontiguousarray(array, dtype=dtype).copy()
    out.setflags(write=False)
    return out


def assemble_mesh(lattice: Lattice, faces: np.ndarray, normals: np.ndarray) -> Mesh:
    """
    Build the output Mesh from the final lattice, faces and vertex normals.

    Args:
        lattice: Final (relaxed) lattice
        faces: (M, 3) triangle indices
        normals: (N*N, 3) unit vertex normals

    Returns:
        Mesh with read-only float32 attributes and uint32 indices
    """
    n = lattice.n_vertices
    faces = np.asarray(faces).reshape(-1, 3)

    if normals.shape != (n, 3):
        raise ValueError(f"Expected {n} normals, got {normals.shape}")
    if faces.size and int(faces.max()) >= n:
        raise ValueError(f"Face index {int(faces.max())} out of range for {n} vertices")
    if not (np.all(np.isfinite(lattice.positions)) and np.all(np.isfinite(normals))):
        raise ValueError("Mesh attributes contain non-finite values")

    texcoords = compute_texcoords(lattice.positions, lattice.box_size)

    return Mesh(
        indices=_frozen(faces.ravel(), np.uint32),
        positions=_frozen(lattice.positions, np.float32),
        normals=_frozen(normals, np.float32),
        texcoords=_frozen(texcoords, np.float32),
        resolution=lattice.resolution,
        box_size=lattice.box_size,
    )
