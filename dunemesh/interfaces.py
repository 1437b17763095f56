"""Shared data structures passed between generation stages."""
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np
from numpy.typing import NDArray


@dataclass
class Lattice:
    """Regular N x N grid of vertices, stored row-major.

    Vertex (i, j) lives at row ``i * resolution + j`` of ``positions``.
    x and y are fixed by the lattice coordinates; only z is mutated by the
    terrain stages.

    Attributes:
        resolution: Vertices per side (N)
        box_size: Side length of the square domain (S)
        positions: Vertex positions (N*N, 3), float64
    """
    resolution: int
    box_size: float
    positions: NDArray[np.float64]

    def __post_init__(self):
        expected = (self.resolution * self.resolution, 3)
        if self.positions.shape != expected:
            raise ValueError(
                f"Lattice positions must have shape {expected}, got {self.positions.shape}"
            )

    @property
    def step(self) -> float:
        return self.box_size / self.resolution

    @property
    def n_vertices(self) -> int:
        return len(self.positions)

    @property
    def heights(self) -> NDArray[np.float64]:
        """Writable view of the height channel (N*N,)."""
        return self.positions[:, 2]

    def height_grid(self) -> NDArray[np.float64]:
        """Height channel as an (N, N) array indexed [i, j]."""
        return self.positions[:, 2].reshape(self.resolution, self.resolution)

    def index(self, i: int, j: int) -> int:
        return i * self.resolution + j


@dataclass(frozen=True)
class VertexAttribute:
    """One vertex attribute buffer as a shader consumes it.

    Attributes:
        name: Attribute name in the vertex shader
        size: Components per vertex
        data: Tightly packed float32 data (n_vertices, size)
    """
    name: str
    size: int
    data: NDArray[np.float32]


@dataclass(frozen=True)
class Mesh:
    """Generated terrain mesh (final pipeline output).

    Buffers are contiguous and read-only; the generator keeps no reference
    to them after returning.

    Attributes:
        indices: Flattened triangle indices (3 * n_triangles,), uint32
        positions: Vertex positions (N*N, 3), float32
        normals: Unit vertex normals (N*N, 3), float32
        texcoords: Planar texture coordinates in [0, 1] (N*N, 2), float32
        resolution: Lattice resolution the mesh was built from
        box_size: Domain side length the mesh was built from
    """
    indices: NDArray[np.uint32]
    positions: NDArray[np.float32]
    normals: NDArray[np.float32]
    texcoords: NDArray[np.float32]
    resolution: int
    box_size: float

    @property
    def n_vertices(self) -> int:
        return len(self.positions)

    @property
    def n_triangles(self) -> int:
        return len(self.indices) // 3

    @property
    def triangles(self) -> NDArray[np.uint32]:
        """Index buffer viewed as (n_triangles, 3)."""
        return self.indices.reshape(-1, 3)

    def attributes(self) -> List[VertexAttribute]:
        """Vertex attribute buffers in upload order."""
        return [
            VertexAttribute("position", 3, self.positions),
            VertexAttribute("normal", 3, self.normals),
            VertexAttribute("texCoord", 2, self.texcoords),
        ]

    def interleaved(self) -> np.ndarray:
        """Single structured vertex buffer (position, normal, texcoord)."""
        vertices = np.zeros(
            self.n_vertices,
            dtype=[
                ("position", np.float32, 3),
                ("normal", np.float32, 3),
                ("texcoord", np.float32, 2),
            ],
        )
        vertices["position"] = self.positions
        vertices["normal"] = self.normals
        vertices["texcoord"] = self.texcoords
        return vertices

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Axis-aligned bounding box (min_xyz, max_xyz)."""
        return self.positions.min(axis=0), self.positions.max(axis=0)
