"""
Топология тела вращения: индексы треугольников.

Порядок треугольников: боковые (по переходам между кольцами), затем
крышка первого кольца, затем крышка последнего. Все треугольники
обходятся по часовой стрелке, если смотреть снаружи (Winding.CW).

Квад между кольцами prev и this и сегментами left, right:

    prev+left ---- prev+right
        |         /    |
        |       /      |
    this+left ---- this+right

верхний треугольник (prev+left, prev+right, this+left),
нижний (prev+right, this+right, this+left).
"""

from __future__ import annotations

import numpy as np

CAP_EPSILON = 0.001
"""Радиус, не превышающий этого порога, считается полюсом: крышка не строится."""


def ring_base(ring: int, segments: int) -> int:
    """Линейный индекс первой вершины кольца."""
    return ring * segments


def wrap(segment: int, segments: int) -> int:
    """Индекс сегмента по модулю: segments -> 0 замыкает шов."""
    return segment % segments


def quad_triangles(prev_ring: int, this_ring: int, left: int, right: int) -> list[tuple[int, int, int]]:
    """Два треугольника квада. prev_ring и this_ring: базовые индексы колец."""
    return [
        (prev_ring + left, prev_ring + right, this_ring + left),
        (prev_ring + right, this_ring + right, this_ring + left),
    ]


def ring_transition_triangles(ring: int, segments: int) -> list[tuple[int, int, int]]:
    """
    Треугольники между кольцами ring - 1 и ring.

    Сначала segments - 1 внутренних квадов (left = j - 1, right = j),
    затем квад шва (left = segments - 1, right = 0).
    """
    prev_ring = ring_base(ring - 1, segments)
    this_ring = ring_base(ring, segments)
    triangles = []
    for j in range(1, segments):
        triangles.extend(quad_triangles(prev_ring, this_ring, j - 1, j))
    # шов
    triangles.extend(quad_triangles(prev_ring, this_ring, segments - 1, wrap(segments, segments)))
    return triangles


def side_triangles(rings: int, segments: int) -> list[tuple[int, int, int]]:
    """Все боковые треугольники: 2 * segments * (rings - 1) штук."""
    triangles = []
    for i in range(1, rings):
        triangles.extend(ring_transition_triangles(i, segments))
    return triangles


def is_cap_needed(radius: float, epsilon: float = CAP_EPSILON) -> bool:
    return radius > epsilon


def first_cap_triangles(segments: int) -> list[tuple[int, int, int]]:
    """Веер первого кольца из вершины 0. Обход обратный последней крышке."""
    return [(k + 2, k + 1, 0) for k in range(segments - 2)]


def last_cap_triangles(rings: int, segments: int) -> list[tuple[int, int, int]]:
    """Веер последнего кольца из его первой вершины."""
    base = ring_base(rings - 1, segments)
    return [(base, base + k + 1, base + k + 2) for k in range(segments - 2)]


def stitch(radii: np.ndarray, segments: int, epsilon: float = CAP_EPSILON) -> np.ndarray:
    """
    Собрать индексы всех треугольников.

    Args:
        radii: радиусы колец, shape (rings,).
        segments: количество сегментов в кольце.
        epsilon: порог вырожденного радиуса для крышек.

    Returns:
        np.ndarray shape (M, 3), dtype int64.
    """
    rings = len(radii)
    triangles = side_triangles(rings, segments)
    if is_cap_needed(radii[0], epsilon):
        triangles.extend(first_cap_triangles(segments))
    if is_cap_needed(radii[-1], epsilon):
        triangles.extend(last_cap_triangles(rings, segments))
    return np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
