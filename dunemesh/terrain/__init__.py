"""Height-field synthesis: lattice, deposition, normalization, relaxation."""
from .grid import grid_index, build_lattice
from .deposition import falloff, apply_slice, deposit_slices
from .normalize import normalize_heights
from .relax import relax_pass, relax_heights

__all__ = [
    'grid_index',
    'build_lattice',
    'falloff',
    'apply_slice',
    'deposit_slices',
    'normalize_heights',
    'relax_pass',
    'relax_heights',
]
