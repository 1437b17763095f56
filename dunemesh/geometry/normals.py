"""Face and vertex normals for triangle meshes."""
from typing import Sequence
import numpy as np

UP = (0.0, 0.0, 1.0)


def compute_face_normals(
    vertices: np.ndarray,
    faces: np.ndarray,
    normalize: bool = False
) -> np.ndarray:
    """
    Compute the normal of each face as cross(v1 - v0, v2 - v0).

    Args:
        vertices: (N, 3) vertex positions
        faces: (M, 3) face indices
        normalize: Return unit normals instead of area-scaled ones

    Returns:
        (M, 3) face normals; degenerate faces give zero vectors
    """
    faces = np.asarray(faces, dtype=np.intp).reshape(-1, 3)
    v0 = vertices[faces[:, 0]]
    v1 = vertices[faces[:, 1]]
    v2 = vertices[faces[:, 2]]

    normals = np.cross(v1 - v0, v2 - v0)

    if normalize:
        norms = np.linalg.norm(normals, axis=1, keepdims=True)
        normals = np.divide(normals, norms, out=np.zeros_like(normals), where=norms > 0)

    return normals


def compute_vertex_normals(
    vertices: np.ndarray,
    faces: np.ndarray,
    fallback: Sequence[float] = UP
) -> np.ndarray:
    """
    Compute unit vertex normals by summing incident face normals.

    Face normals are left unnormalized before summing, so larger faces
    weigh more. A vertex whose sum is zero (no incident faces, or only
    degenerate ones) gets ``fallback``.

    Args:
        vertices: (N, 3) vertex positions
        faces: (M, 3) face indices
        fallback: Normal for vertices with a zero accumulator

    Returns:
        (N, 3) unit vertex normals, float64
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    faces = np.asarray(faces, dtype=np.intp).reshape(-1, 3)
    face_normals = compute_face_normals(vertices, faces)

    accum = np.zeros_like(vertices)
    for corner in range(3):
        np.add.at(accum, faces[:, corner], face_normals)

    norms = np.linalg.norm(accum, axis=1)
    degenerate = norms == 0.0

    normals = np.empty_like(accum)
    normals[~degenerate] = accum[~degenerate] / norms[~degenerate, None]
    normals[degenerate] = np.asarray(fallback, dtype=np.float64)
    return normals
