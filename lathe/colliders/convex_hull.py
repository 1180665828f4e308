"""
Выпуклая оболочка как коллайдер.

Строится через scipy.spatial.ConvexHull. Вырожденные наборы точек
(все точки в одной плоскости или на одной прямой) не считаются ошибкой:
вместо объёмной оболочки возвращается плоский многоугольник или отрезок.
Ошибкой считается только пустой набор или набор из одной точки.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from lathe import log
from lathe.mesh.mesh import Mesh3, Winding, face_normals, orient_outward


class HullConstructionError(ValueError):
    """Point set has no convex hull at all (empty or a single point)."""


# Относительный порог ранга облака точек (доля от наибольшего сингулярного числа)
RANK_TOLERANCE = 1e-9


def _point_rank(points: np.ndarray) -> int:
    centered = points - points.mean(axis=0)
    sv = np.linalg.svd(centered, compute_uv=False)
    if sv[0] == 0.0:
        return 0
    return int(np.sum(sv > sv[0] * RANK_TOLERANCE))


def _compact(points: np.ndarray, used: np.ndarray, triangles: np.ndarray):
    """Оставить только используемые точки и перенумеровать треугольники."""
    remap = np.full(points.shape[0], -1, dtype=np.int64)
    remap[used] = np.arange(len(used))
    return points[used], remap[triangles].reshape(-1, 3)


def _flat_hull(points: np.ndarray, rank: int):
    """
    Плоская оболочка для вырожденного облака.

    rank == 1: отрезок между крайними точками, без граней.
    rank == 2: выпуклый многоугольник в плоскости точек, веер треугольников
    в обе стороны (двусторонний).
    """
    center = points.mean(axis=0)
    _, _, vt = np.linalg.svd(points - center)

    if rank <= 1:
        t = (points - center) @ vt[0]
        used = np.array([np.argmin(t), np.argmax(t)], dtype=np.int64)
        return used, np.empty((0, 3), dtype=np.int64)

    planar = (points - center) @ vt[:2].T
    outline = ConvexHull(planar).vertices  # CCW order in 2D
    fan = []
    for k in range(1, len(outline) - 1):
        a, b, c = outline[0], outline[k], outline[k + 1]
        fan.append((a, b, c))
        fan.append((a, c, b))
    return np.asarray(outline, dtype=np.int64), np.asarray(fan, dtype=np.int64).reshape(-1, 3)


class ConvexHullCollider:
    """
    Выпуклый многогранник, охватывающий набор точек.

    Атрибуты:
        vertices: (K, 3) вершины оболочки.
        triangles: (F, 3) грани, нормали (по соглашению winding) наружу.
        source_indices: (K,) индекс исходной точки для каждой вершины оболочки.
        winding: соглашение об обходе лицевой стороны, как у Mesh3.
        degenerate: True, если оболочка плоская (отрезок или многоугольник).
    """

    def __init__(
        self,
        vertices: np.ndarray,
        triangles: np.ndarray,
        source_indices: np.ndarray,
        winding: Winding = Winding.CW,
        degenerate: bool = False,
    ):
        self.vertices = np.asarray(vertices, dtype=np.float64)
        self.triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
        self.source_indices = np.asarray(source_indices, dtype=np.int64)
        self.winding = winding
        self.degenerate = degenerate
        for arr in (self.vertices, self.triangles, self.source_indices):
            arr.setflags(write=False)

    @staticmethod
    def from_points(points, winding: Winding = Winding.CW) -> "ConvexHullCollider":
        """
        Построить оболочку набора точек.

        Raises:
            HullConstructionError: набор пуст или все точки совпадают.
        """
        # + 0.0 превращает -0.0 в 0.0, чтобы совпадающие точки на оси схлопнулись
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3) + 0.0
        if pts.shape[0] == 0:
            raise HullConstructionError("Cannot build a convex hull of an empty point set")

        unique, first_index = np.unique(pts, axis=0, return_index=True)
        if unique.shape[0] == 1:
            raise HullConstructionError("Cannot build a convex hull of a single point")

        rank = _point_rank(unique)
        hull = None
        if rank == 3:
            try:
                hull = ConvexHull(unique)
            except QhullError as e:
                log.warn(e, "Convex hull failed, retrying with joggled input")
                hull = ConvexHull(unique, qhull_options="QJ")

        if hull is not None:
            used = np.asarray(hull.vertices, dtype=np.int64)
            triangles = hull.simplices
            degenerate = False
        else:
            log.warn(
                f"Convex hull of {unique.shape[0]} points is flat (rank {rank}), "
                "using a best-effort planar volume"
            )
            used, triangles = _flat_hull(unique, rank)
            degenerate = True

        vertices, triangles = _compact(unique, used, triangles)
        if not degenerate:
            triangles = orient_outward(vertices, triangles, winding)

        return ConvexHullCollider(
            vertices=vertices,
            triangles=triangles,
            source_indices=first_index[used],
            winding=winding,
            degenerate=degenerate,
        )

    def get_vertex_count(self) -> int:
        return self.vertices.shape[0]

    def get_face_count(self) -> int:
        return self.triangles.shape[0]

    @property
    def face_planes(self) -> tuple[np.ndarray, np.ndarray]:
        """Единичные внешние нормали граней (F, 3) и смещения (F,): n·x = d."""
        normals = face_normals(self.vertices, self.triangles, self.winding)
        norms = np.linalg.norm(normals, axis=1, keepdims=True)
        norms[norms == 0] = 1
        normals = normals / norms
        offsets = np.einsum("ij,ij->i", normals, self.vertices[self.triangles[:, 0]])
        return normals, offsets

    @property
    def volume(self) -> float:
        """Объём по теореме о дивергенции. Для плоской оболочки 0."""
        if self.degenerate or self.get_face_count() == 0:
            return 0.0
        normals = face_normals(self.vertices, self.triangles, self.winding)
        a = self.vertices[self.triangles[:, 0]]
        return float(np.einsum("ij,ij->", a, normals) / 6.0)

    def aabb(self) -> tuple[np.ndarray, np.ndarray]:
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def support(self, direction) -> np.ndarray:
        """Самая дальняя вершина оболочки в направлении direction."""
        d = np.asarray(direction, dtype=np.float64)
        return self.vertices[int(np.argmax(self.vertices @ d))]

    def contains(self, point, tolerance: float = 1e-9) -> bool:
        """
        Точка внутри оболочки или на её границе.

        Для плоской оболочки точка должна лежать в её плоскости внутри
        многоугольника, для отрезка на самом отрезке.
        """
        p = np.asarray(point, dtype=np.float64)
        lo, hi = self.aabb()
        if np.any(p < lo - tolerance) or np.any(p > hi + tolerance):
            return False
        if self.degenerate:
            return self._flat_contains(p, tolerance)
        normals, offsets = self.face_planes
        return bool(np.all(normals @ p - offsets <= tolerance))

    def _flat_contains(self, p: np.ndarray, tolerance: float) -> bool:
        v = self.vertices
        if v.shape[0] == 2:
            d = v[1] - v[0]
            t = np.clip(np.dot(p - v[0], d) / np.dot(d, d), 0.0, 1.0)
            return bool(np.linalg.norm(p - (v[0] + t * d)) <= tolerance)

        # вершины идут по контуру многоугольника, соседние тройки не коллинеарны
        center = v.mean(axis=0)
        normal = np.cross(v[1] - v[0], v[2] - v[0])
        normal /= np.linalg.norm(normal)
        if abs(np.dot(normal, p - center)) > tolerance:
            return False

        edges = np.roll(v, -1, axis=0) - v
        inward = np.cross(edges, normal)
        inward /= np.linalg.norm(inward, axis=1, keepdims=True)
        flip = np.einsum("ij,ij->i", inward, center - v) < 0
        inward[flip] *= -1.0
        return bool(np.all(np.einsum("ij,ij->i", inward, p - v) >= -tolerance))

    def to_mesh(self) -> Mesh3:
        mesh = Mesh3(self.vertices.copy(), self.triangles.copy(), winding=self.winding, name="ConvexHull")
        return mesh

    def __repr__(self):
        return (
            f"ConvexHullCollider(vertices={self.get_vertex_count()}, "
            f"faces={self.get_face_count()}, degenerate={self.degenerate})"
        )
