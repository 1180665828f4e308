"""
Сетка вершин тела вращения.

Кольцо i лежит на высоте y = 1 - 2 * i / (rings - 1), то есть первое
кольцо сверху (y = +1), последнее снизу (y = -1). Сегмент j имеет
u = 1 - j / segments и угол theta = 2 * pi * u. Вершина с j = segments
не создаётся: кольцо замыкается через индекс, а не дублированием.
"""

from __future__ import annotations

import numpy as np


def build_grid(radii: np.ndarray, axis_scale, segments: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Построить позиции и UV для всех (кольцо, сегмент).

    Args:
        radii: радиусы колец, shape (rings,).
        axis_scale: масштаб (sx, sy, sz).
        segments: количество сегментов в кольце.

    Returns:
        vertices (rings * segments, 3), uvs (rings * segments, 2),
        порядок row-major: индекс = ring * segments + segment.
    """
    rings = len(radii)
    sx, sy, sz = (float(s) for s in axis_scale)

    vertices = np.empty((rings * segments, 3), dtype=np.float64)
    uvs = np.empty((rings * segments, 2), dtype=np.float64)

    for i in range(rings):
        v = i / (rings - 1)
        y = 1.0 - 2.0 * v
        r = float(radii[i])
        for j in range(segments):
            u = 1.0 - j / segments
            theta = 2.0 * np.pi * u
            index = i * segments + j
            vertices[index] = (sx * r * np.cos(theta), sy * y, sz * r * np.sin(theta))
            uvs[index] = (u, v)

    return vertices, uvs
