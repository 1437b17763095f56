#!/usr/bin/env python3
"""
Dune Terrain Preview Demo

Generates a dune terrain mesh and previews it the way a renderer would
consume it:
- 3D view of the triangle mesh, Lambert-shaded from the vertex normals
- Top-down hillshade laid out in texture (u, v) space

Usage:
    python terrain_preview_demo.py [config.yaml]
"""
import sys
import logging

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from dunemesh import TerrainConfig, TerrainGenerator, setup_logging

LIGHT_DIR = np.array([-0.5, 0.5, 1.0]) / np.linalg.norm([-0.5, 0.5, 1.0])
SAND = np.array([0.86, 0.72, 0.48])


def lambert(normals: np.ndarray, ambient: float = 0.25) -> np.ndarray:
    """Diffuse intensity in [ambient, 1] for unit normals."""
    diffuse = np.clip(normals @ LIGHT_DIR, 0.0, 1.0)
    return ambient + (1.0 - ambient) * diffuse


def plot_3d_mesh(ax, mesh):
    """Plot the triangle mesh with per-face shading."""
    pos = mesh.positions
    tris = mesh.triangles.astype(np.int64)

    # Face shade = mean of its vertex intensities
    shade = lambert(mesh.normals)[tris].mean(axis=1)

    surf = ax.plot_trisurf(pos[:, 0], pos[:, 1], pos[:, 2], triangles=tris,
                           linewidth=0, antialiased=False, shade=False)
    surf.set_facecolor(shade[:, None] * SAND)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    ax.set_title(f'Mesh ({mesh.n_triangles} triangles)', fontsize=11)
    ax.set_box_aspect((1, 1, 0.5))


def plot_hillshade(ax, mesh):
    """Plot the shading as an image in texture space."""
    n = mesh.resolution
    intensity = lambert(mesh.normals).reshape(n, n)
    uv = mesh.texcoords

    # Lattice [i, j] runs along (x, y); image rows run along v, columns along u
    ax.imshow(intensity.T, cmap='copper', origin='lower',
              extent=(uv[:, 0].min(), uv[:, 0].max(), uv[:, 1].max(), uv[:, 1].min()))
    ax.set_xlabel('u')
    ax.set_ylabel('v')
    ax.set_title('Hillshade (texture space)', fontsize=11)


def run_demo(config_path=None, output='terrain_preview.png'):
    """Generate a terrain and write the preview figure."""
    setup_logging(logging.INFO)

    if config_path:
        config = TerrainConfig.from_yaml(config_path)
    else:
        config = TerrainConfig(seed=42)

    print("=" * 60)
    print("DUNE TERRAIN PREVIEW")
    print("=" * 60)
    print(f"  Resolution: {config.resolution} x {config.resolution}")
    print(f"  Box size: {config.box_size:.0f}")
    print(f"  Slices: {config.n_slices}, smoothing passes: {config.smoothing_passes}")

    generator = TerrainGenerator(config)
    mesh = generator.run()

    lo, hi = mesh.bounds()
    print(f"\n  Vertices: {mesh.n_vertices}")
    print(f"  Triangles: {mesh.n_triangles}")
    print(f"  Height range: {lo[2]:.1f} .. {hi[2]:.1f}")
    for name, seconds in generator.stage_times_s.items():
        print(f"    {name:<12} {1e3 * seconds:8.1f} ms")

    fig = plt.figure(figsize=(14, 6))
    fig.suptitle('Procedural Dune Terrain', fontsize=14, fontweight='bold')
    plot_3d_mesh(fig.add_subplot(1, 2, 1, projection='3d'), mesh)
    plot_hillshade(fig.add_subplot(1, 2, 2), mesh)

    plt.tight_layout()
    plt.savefig(output, dpi=120)
    plt.close(fig)
    print(f"\nSaved {output}")


if __name__ == "__main__":
    run_demo(sys.argv[1] if len(sys.argv) > 1 else None)
