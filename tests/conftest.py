"""Shared pytest fixtures for all test modules."""
import pytest
import numpy as np

from dunemesh.config import TerrainConfig
from dunemesh.random_source import ScriptedSource
from dunemesh.terrain.grid import build_lattice


# === Configuration Fixtures ===

@pytest.fixture
def default_config():
    """Configuration with the reference scene defaults."""
    return TerrainConfig()


@pytest.fixture
def small_config():
    """Reduced config for faster tests."""
    return TerrainConfig(resolution=16, box_size=100.0, n_slices=20,
                         deposition_radius=10.0, deposition_magnitude=10.0, seed=1234)


# === Lattice Fixtures ===

@pytest.fixture
def flat_lattice():
    """4 x 4 flat lattice over a 40-unit box."""
    return build_lattice(4, 40.0)


@pytest.fixture
def slice_lattice():
    """10 x 10 flat lattice over a 500-unit box."""
    return build_lattice(10, 500.0)


# === Randomness Fixtures ===

@pytest.fixture
def seeded_rng():
    return np.random.default_rng(2024)


@pytest.fixture
def origin_slice_source():
    """One slice pivoted at the origin, pointing along +x."""
    return ScriptedSource([0.5, 0.5, 0.0])
