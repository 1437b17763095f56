"""Tests for face and vertex normals."""
import pytest
import numpy as np

from dunemesh.geometry.normals import compute_face_normals, compute_vertex_normals


class TestFaceNormals:

    def test_area_scaled(self):
        vertices = np.array([[0.0, 0, 0], [2.0, 0, 0], [0.0, 2, 0]])
        normals = compute_face_normals(vertices, np.array([[0, 1, 2]]))
        assert np.allclose(normals[0], [0, 0, 4])

    def test_normalized(self):
        vertices = np.array([[0.0, 0, 0], [2.0, 0, 0], [0.0, 2, 0]])
        normals = compute_face_normals(vertices, np.array([[0, 1, 2]]), normalize=True)
        assert np.linalg.norm(normals[0]) == pytest.approx(1.0)

    def test_winding_flips(self):
        vertices = np.array([[0.0, 0, 0], [1.0, 0, 0], [0.0, 1, 0]])
        normals = compute_face_normals(vertices, np.array([[0, 2, 1]]))
        assert normals[0, 2] < 0

    def test_degenerate_face_normalized_is_zero(self):
        vertices = np.array([[0.0, 0, 0], [1.0, 0, 0], [2.0, 0, 0]])
        normals = compute_face_normals(vertices, np.array([[0, 1, 2]]), normalize=True)
        assert np.all(normals == 0.0)


class TestVertexNormals:

    def test_single_triangle(self):
        vertices = np.array([[0.0, 0, 0], [1.0, 0, 0], [0.0, 1, 0]])
        normals = compute_vertex_normals(vertices, np.array([[0, 1, 2]]))
        assert np.allclose(normals, [[0, 0, 1]] * 3)

    def test_area_weighted(self):
        """A shared vertex leans toward the larger incident face."""
        vertices = np.array([
            [0.0, 0, 0],
            [2.0, 0, 0], [0.0, 2, 0],   # xy-plane face, normal (0, 0, 4)
            [0.0, 1, 0], [0.0, 0, 1],   # yz-plane face, normal (1, 0, 0)
        ])
        faces = np.array([[0, 1, 2], [0, 3, 4]])
        normals = compute_vertex_normals(vertices, faces)
        assert np.allclose(normals[0], np.array([1.0, 0, 4.0]) / np.sqrt(17))

    def test_unit_length(self, seeded_rng):
        vertices = seeded_rng.normal(size=(30, 3))
        faces = seeded_rng.integers(0, 30, size=(40, 3))
        normals = compute_vertex_normals(vertices, faces)
        assert np.allclose(np.linalg.norm(normals, axis=1), 1.0)

    def test_isolated_vertex_falls_back_up(self):
        vertices = np.array([[0.0, 0, 0], [1.0, 0, 0], [0.0, 1, 0], [5.0, 5, 5]])
        normals = compute_vertex_normals(vertices, np.array([[0, 1, 2]]))
        assert np.allclose(normals[3], [0, 0, 1])

    def test_degenerate_only_falls_back(self):
        vertices = np.array([[0.0, 0, 0], [1.0, 0, 0], [2.0, 0, 0]])
        normals = compute_vertex_normals(vertices, np.array([[0, 1, 2]]))
        assert np.allclose(normals, [[0, 0, 1]] * 3)

    def test_custom_fallback(self):
        vertices = np.zeros((2, 3))
        normals = compute_vertex_normals(vertices, np.zeros((0, 3), dtype=np.uint32),
                                         fallback=(1.0, 0.0, 0.0))
        assert np.allclose(normals, [[1, 0, 0], [1, 0, 0]])

    def test_opposite_faces_cancel_to_fallback(self):
        """Equal and opposite faces leave a zero accumulator."""
        vertices = np.array([[0.0, 0, 0], [1.0, 0, 0], [0.0, 1, 0]])
        faces = np.array([[0, 1, 2], [0, 2, 1]])
        normals = compute_vertex_normals(vertices, faces)
        assert np.allclose(normals, [[0, 0, 1]] * 3)
