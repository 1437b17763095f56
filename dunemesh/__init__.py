"""Procedural dune terrain mesh generation."""
from .config import TerrainConfig, TerrainConfigError
from .interfaces import Lattice, Mesh, VertexAttribute
from .random_source import RandomSource, SourceLike, ScriptedSource, as_random_source
from .pipeline import TerrainGenerator, generate, generate_terrain
from .logging_config import setup_logging

__all__ = [
    "TerrainConfig",
    "TerrainConfigError",
    "Lattice",
    "Mesh",
    "VertexAttribute",
    "RandomSource",
    "SourceLike",
    "ScriptedSource",
    "as_random_source",
    "TerrainGenerator",
    "generate",
    "generate_terrain",
    "setup_logging",
]
