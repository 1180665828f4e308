"""
Финализация поверхности: нормали вершин и выпуклая оболочка.
"""

from __future__ import annotations

import numpy as np

from lathe import log
from lathe.colliders.convex_hull import ConvexHullCollider
from lathe.mesh.mesh import Mesh3, Winding

# Не больше стольких индексов в сообщении о вершинах без нормали
_MAX_REPORTED = 16


def compute_vertex_normals(mesh: Mesh3) -> np.ndarray:
    """
    Нормали вершин по накопленным нормалям граней.

    Вершина без невырожденных граней получает NaN и попадает в лог.
    """
    normals = mesh.compute_vertex_normals()
    orphans = np.flatnonzero(np.isnan(normals[:, 0]))
    if len(orphans) > 0:
        shown = ", ".join(str(i) for i in orphans[:_MAX_REPORTED])
        if len(orphans) > _MAX_REPORTED:
            shown += ", ..."
        log.warn(f"{mesh.name}: {len(orphans)} vertices have no defined normal: [{shown}]")
    return normals


def build_collider(mesh: Mesh3) -> ConvexHullCollider:
    return ConvexHullCollider.from_points(mesh.vertices, winding=mesh.winding)


def finalize(
    vertices: np.ndarray,
    uvs: np.ndarray,
    triangles: np.ndarray,
    name: str = "Revolved",
    mirrored: bool = False,
) -> tuple[Mesh3, ConvexHullCollider]:
    """
    Собрать Mesh3, посчитать нормали, построить оболочку и заморозить меш.

    Отражённая сетка (mirrored) с теми же индексами обходится в обратную
    сторону, поэтому помечается как CCW.
    """
    winding = Winding.CCW if mirrored else Winding.CW
    mesh = Mesh3(vertices, triangles, uvs=uvs, winding=winding, name=name)
    compute_vertex_normals(mesh)
    collider = build_collider(mesh)
    mesh.freeze()
    return mesh, collider
