"""Tests for lattice construction."""
import pytest
import numpy as np

from dunemesh.terrain.grid import grid_index, build_lattice


class TestGridIndex:

    def test_row_major(self):
        assert grid_index(0, 0, 4) == 0
        assert grid_index(0, 3, 4) == 3
        assert grid_index(1, 0, 4) == 4
        assert grid_index(3, 3, 4) == 15

    def test_vectorized(self):
        i = np.array([0, 1, 2])
        j = np.array([2, 1, 0])
        assert np.array_equal(grid_index(i, j, 3), [2, 4, 6])


class TestBuildLattice:

    def test_vertex_count(self):
        lattice = build_lattice(7, 10.0)
        assert lattice.n_vertices == 49
        assert lattice.positions.shape == (49, 3)

    def test_flat(self, flat_lattice):
        assert np.all(flat_lattice.heights == 0.0)

    def test_coordinates(self, flat_lattice):
        """x follows i, y follows j, step = S/N, origin-centered."""
        assert np.allclose(flat_lattice.positions[grid_index(0, 0, 4)], [-20, -20, 0])
        assert np.allclose(flat_lattice.positions[grid_index(1, 2, 4)], [-10, 0, 0])
        assert np.allclose(flat_lattice.positions[grid_index(3, 3, 4)], [10, 10, 0])

    def test_step(self, flat_lattice):
        xs = np.unique(flat_lattice.positions[:, 0])
        assert np.allclose(np.diff(xs), 10.0)
        assert flat_lattice.step == pytest.approx(10.0)

    def test_single_vertex(self):
        lattice = build_lattice(1, 8.0)
        assert np.allclose(lattice.positions, [[-4.0, -4.0, 0.0]])
