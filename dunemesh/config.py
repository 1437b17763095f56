"""Terrain generation configuration management."""
from dataclasses import dataclass, asdict, fields
from typing import List, Literal, Optional, Union
from pathlib import Path
import math
import numbers
import yaml


class TerrainConfigError(ValueError):
    """Raised when a terrain configuration is rejected before generation."""


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass
class TerrainConfig:
    """Configuration for dune terrain generation.

    Attributes:
        resolution: Vertices per lattice side (N)
        box_size: Side length of the square domain (S)
        n_slices: Number of deposition slices (K)
        smoothing_passes: Number of relaxation passes (P)
        deposition_radius: Falloff radius of a slice (R)
        deposition_magnitude: Initial slice magnitude before decay
        magnitude_decay: Per-slice multiplicative magnitude decay
        height_ratio: Target height range as a fraction of box_size
        negative_side: Policy for vertices behind a slice ("mirror" or "skip")
        seed: Seed for the default random source (None = nondeterministic)
    """

    # Lattice
    resolution: int = 100
    box_size: float = 500.0

    # Deposition
    n_slices: int = 100
    deposition_radius: float = 50.0     # box_size / 10
    deposition_magnitude: float = 50.0  # box_size / 10
    magnitude_decay: float = 0.99
    negative_side: Literal["mirror", "skip"] = "mirror"

    # Height range
    height_ratio: float = 0.5

    # Relaxation
    smoothing_passes: int = 5

    # Randomness
    seed: Optional[int] = None

    @property
    def step(self) -> float:
        """Lattice spacing S/N."""
        return self.box_size / self.resolution

    @property
    def max_height(self) -> float:
        """Upper bound H of the normalized height range."""
        return self.height_ratio * self.box_size

    @property
    def n_vertices(self) -> int:
        return self.resolution * self.resolution

    @property
    def n_triangles(self) -> int:
        return 2 * max(self.resolution - 1, 0) ** 2

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "TerrainConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise TerrainConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        with open(path, 'w') as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if isinstance(self.resolution, bool) or not isinstance(self.resolution, numbers.Integral):
            errors.append("resolution must be an integer")
        elif self.resolution < 1:
            errors.append("resolution must be >= 1")

        if not (_is_real(self.box_size) and math.isfinite(self.box_size) and self.box_size > 0):
            errors.append("box_size must be a finite number > 0")

        if not (_is_real(self.deposition_radius) and math.isfinite(self.deposition_radius)
                and self.deposition_radius > 0):
            errors.append("deposition_radius must be a finite number > 0")

        if not (_is_real(self.deposition_magnitude) and math.isfinite(self.deposition_magnitude)
                and self.deposition_magnitude >= 0):
            errors.append("deposition_magnitude must be finite and >= 0")

        if not (_is_real(self.magnitude_decay) and 0 < self.magnitude_decay <= 1):
            errors.append("magnitude_decay must be a number in (0, 1]")

        if not (_is_real(self.height_ratio) and math.isfinite(self.height_ratio)
                and self.height_ratio > 0):
            errors.append("height_ratio must be a finite number > 0")

        for name in ("n_slices", "smoothing_passes"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 0:
                errors.append(f"{name} must be a non-negative integer")

        if self.negative_side not in ("mirror", "skip"):
            errors.append("negative_side must be 'mirror' or 'skip'")

        return errors

    def check(self) -> "TerrainConfig":
        """Raise TerrainConfigError if the configuration is invalid."""
        errors = self.validate()
        if errors:
            raise TerrainConfigError("Invalid terrain config: " + "; ".join(errors))
        return self
