"""Mesh construction: triangulation, normals, output packaging."""
from .triangulate import triangulate_grid
from .normals import compute_face_normals, compute_vertex_normals
from .assemble import compute_texcoords, assemble_mesh

__all__ = [
    'triangulate_grid',
    'compute_face_normals',
    'compute_vertex_normals',
    'compute_texcoords',
    'assemble_mesh',
]
