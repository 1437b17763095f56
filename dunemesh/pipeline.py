"""End-to-end terrain mesh generation pipeline."""
import logging
import time
from typing import Dict, Optional

from .config import TerrainConfig
from .interfaces import Lattice, Mesh
from .random_source import SourceLike, as_random_source
from .terrain.grid import build_lattice
from .terrain.deposition import deposit_slices
from .terrain.normalize import normalize_heights
from .terrain.relax import relax_heights
from .geometry.triangulate import triangulate_grid
from .geometry.normals import compute_vertex_normals
from .geometry.assemble import assemble_mesh

logger = logging.getLogger(__name__)


class TerrainGenerator:
    """
    Runs the generation stages in order for one configuration.

    Stages: build lattice -> deposit slices -> normalize heights ->
    relax -> triangulate -> vertex normals -> assemble mesh.

    After ``run`` the final lattice and per-stage timings stay available
    for inspection; the returned Mesh shares no memory with them.
    """

    def __init__(self, config: TerrainConfig):
        self.config = config.check()
        self.lattice: Optional[Lattice] = None
        self.stage_times_s: Dict[str, float] = {}

    def _timed(self, name: str, start: float) -> float:
        now = time.perf_counter()
        self.stage_times_s[name] = now - start
        logger.debug(f"Stage '{name}' took {1e3 * (now - start):.1f} ms")
        return now

    def run(self, random_source: SourceLike = None) -> Mesh:
        """
        Generate a terrain mesh.

        Args:
            random_source: Uniform float source; defaults to a numpy
                Generator seeded with ``config.seed``

        Returns:
            Generated Mesh
        """
        cfg = self.config.check()
        rand = as_random_source(random_source, seed=cfg.seed)
        self.stage_times_s = {}

        logger.info(
            f"Generating terrain: N={cfg.resolution}, S={cfg.box_size}, "
            f"slices={cfg.n_slices}, passes={cfg.smoothing_passes}"
        )
        start = time.perf_counter()

        lattice = build_lattice(cfg.resolution, cfg.box_size)
        t = self._timed("grid", start)

        deposit_slices(
            lattice,
            cfg.n_slices,
            cfg.deposition_magnitude,
            cfg.deposition_radius,
            rand,
            decay=cfg.magnitude_decay,
            negative_side=cfg.negative_side,
        )
        t = self._timed("deposition", t)

        normalize_heights(lattice, cfg.max_height)
        t = self._timed("normalize", t)

        relax_heights(lattice, cfg.smoothing_passes)
        t = self._timed("relax", t)

        faces = triangulate_grid(cfg.resolution)
        t = self._timed("triangulate", t)

        normals = compute_vertex_normals(lattice.positions, faces)
        t = self._timed("normals", t)

        mesh = assemble_mesh(lattice, faces, normals)
        t = self._timed("assemble", t)

        self.lattice = lattice
        logger.info(
            f"Generated {mesh.n_vertices} vertices, {mesh.n_triangles} triangles "
            f"in {t - start:.3f} s"
        )
        return mesh


def generate_terrain(
    config: TerrainConfig,
    random_source: SourceLike = None
) -> Mesh:
    """Generate a terrain mesh from a TerrainConfig."""
    return TerrainGenerator(config).run(random_source)


def generate(
    resolution: int,
    domain_size: float,
    iteration_count: int,
    smoothing_passes: int,
    deposition_radius: float,
    deposition_magnitude: float,
    random_source: SourceLike = None,
) -> Mesh:
    """
    Generate a terrain mesh with the default height range and decay.

    Args:
        resolution: Vertices per lattice side (N)
        domain_size: Domain side length (S)
        iteration_count: Number of deposition slices (K)
        smoothing_passes: Number of relaxation passes (P)
        deposition_radius: Slice falloff radius (R)
        deposition_magnitude: Initial slice magnitude
        random_source: Uniform float source in [0, 1); a seeded numpy
            Generator or any zero-argument callable

    Returns:
        Generated Mesh

    Raises:
        TerrainConfigError: If any parameter is out of range
    """
    config = TerrainConfig(
        resolution=resolution,
        box_size=domain_size,
        n_slices=iteration_count,
        smoothing_passes=smoothing_passes,
        deposition_radius=deposition_radius,
        deposition_magnitude=deposition_magnitude,
    )
    return generate_terrain(config, random_source)
