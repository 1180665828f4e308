"""Triangle mesh container and vertex layout definitions."""

from __future__ import annotations

from enum import Enum

import numpy as np


class Winding(Enum):
    """Vertex order of a front-facing triangle, seen from outside."""
    CW = "cw"
    CCW = "ccw"

    def opposite(self) -> "Winding":
        return Winding.CCW if self is Winding.CW else Winding.CW


# GPU COMPATIBILITY

class VertexAttribType(Enum):
    FLOAT32 = "float32"
    INT32 = "int32"
    UINT32 = "uint32"


class VertexAttribute:
    def __init__(self, name, size, vtype: VertexAttribType, offset):
        self.name = name
        self.size = size
        self.vtype = vtype
        self.offset = offset


class VertexLayout:
    def __init__(self, stride, attributes):
        self.stride = stride    # размер одной вершины в байтах
        self.attributes = attributes  # список VertexAttribute


def face_normals(vertices: np.ndarray, triangles: np.ndarray, winding: Winding = Winding.CW) -> np.ndarray:
    """
    Unnormalized face normals, length equal to twice the triangle area.

    CCW: ``(v1-v0) × (v2-v0)``, CW: ``(v2-v0) × (v1-v0)``.
    """
    v0 = vertices[triangles[:, 0], :]
    v1 = vertices[triangles[:, 1], :]
    v2 = vertices[triangles[:, 2], :]
    if winding is Winding.CW:
        return np.cross(v2 - v0, v1 - v0)
    return np.cross(v1 - v0, v2 - v0)


def orient_outward(vertices: np.ndarray, triangles: np.ndarray, winding: Winding = Winding.CW,
                   center: np.ndarray | None = None) -> np.ndarray:
    """Развернуть треугольники выпуклого тела так, чтобы нормали смотрели от центра."""
    triangles = np.array(triangles, dtype=np.int64).reshape(-1, 3)
    if center is None:
        center = vertices.mean(axis=0)
    normals = face_normals(vertices, triangles, winding)
    to_center = center - vertices[triangles[:, 0]]
    inward = np.einsum("ij,ij->i", normals, to_center) > 0
    triangles[inward] = triangles[inward][:, [0, 2, 1]]
    return triangles


class Mesh3:
    """Triangle mesh storing vertex positions, triangle indices, uvs and normals."""

    def __init__(
        self,
        vertices: np.ndarray,
        triangles: np.ndarray,
        uvs: np.ndarray | None = None,
        winding: Winding = Winding.CW,
        name: str = "",
    ):
        self.vertices = np.asarray(vertices, dtype=np.float64)
        self.triangles = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
        self.uv = np.asarray(uvs, dtype=np.float64) if uvs is not None else None
        self.winding = winding
        self.name = name
        self.vertex_normals: np.ndarray | None = None
        self.face_normals: np.ndarray | None = None
        self._inter = None
        self._validate_mesh()

    def _validate_mesh(self):
        """Ensure that the vertex/index arrays have correct shapes and bounds."""
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3:
            raise ValueError("Vertices must be a Nx3 array.")
        if self.triangles.ndim != 2 or self.triangles.shape[1] != 3:
            raise ValueError("Triangles must be a Mx3 array.")
        if np.any(self.triangles < 0) or np.any(self.triangles >= self.vertices.shape[0]):
            raise ValueError("Triangle indices must be valid vertex indices.")
        if self.uv is not None and self.uv.shape != (self.vertices.shape[0], 2):
            raise ValueError("UVs must be a Nx2 array matching the vertex count.")

    def get_vertex_count(self) -> int:
        return self.vertices.shape[0]

    def get_face_count(self) -> int:
        return self.triangles.shape[0]

    def flat_indices(self) -> np.ndarray:
        """Index buffer as a flat sequence, three indices per triangle."""
        return self.triangles.reshape(-1).astype(np.uint32)

    def compute_faces_normals(self):
        """Compute unit per-face normals. Degenerate faces get a zero normal."""
        normals = face_normals(self.vertices, self.triangles, self.winding)
        norms = np.linalg.norm(normals, axis=1, keepdims=True)
        norms[norms == 0] = 1  # Prevent division by zero
        self.face_normals = normals / norms
        return self.face_normals

    def compute_vertex_normals(self):
        """
        Compute area-weighted vertex normals: ``n_v = sum_{t∈F(v)} n_t``.

        Vertices with a zero sum get NaN, they have no defined normal.
        """
        normals = np.zeros_like(self.vertices, dtype=np.float64)
        fn = face_normals(self.vertices, self.triangles, self.winding)
        for corner in range(3):
            np.add.at(normals, self.triangles[:, corner], fn)
        norms = np.linalg.norm(normals, axis=1)
        with np.errstate(invalid="ignore", divide="ignore"):
            self.vertex_normals = normals / norms[:, None]
        self.vertex_normals[norms == 0] = np.nan
        return self.vertex_normals

    def get_vertex_layout(self) -> VertexLayout:
        return VertexLayout(
            stride=8 * 4,  # всегда: pos(3) + normal(3) + uv(2)
            attributes=[
                VertexAttribute("position", 3, VertexAttribType.FLOAT32, 0),
                VertexAttribute("normal",   3, VertexAttribType.FLOAT32, 12),
                VertexAttribute("uv",       2, VertexAttribType.FLOAT32, 24),
            ]
        )

    def build_interleaved_buffer(self):
        pos = self.vertices.astype(np.float32)

        # нормали: если нет, генерим нули
        if self.vertex_normals is None:
            normals = np.zeros_like(pos)
        else:
            normals = self.vertex_normals.astype(np.float32)

        # uv: если нет, ставим (0,0)
        if self.uv is None:
            uvs = np.zeros((pos.shape[0], 2), dtype=np.float32)
        else:
            uvs = self.uv.astype(np.float32)

        return np.hstack([pos, normals, uvs])

    def interleaved_buffer(self):
        if self._inter is None:
            self._inter = self.build_interleaved_buffer()
        return self._inter

    def flipped(self) -> "Mesh3":
        """
        Same visible faces described with the opposite winding convention.

        Useful for hosts whose front faces are counter-clockwise.
        """
        mesh = Mesh3(
            self.vertices.copy(),
            self.triangles[:, [0, 2, 1]],
            self.uv.copy() if self.uv is not None else None,
            winding=self.winding.opposite(),
            name=self.name,
        )
        if self.vertex_normals is not None:
            mesh.vertex_normals = self.vertex_normals.copy()
        return mesh

    def freeze(self) -> "Mesh3":
        """Make every buffer read-only. Returns self."""
        for arr in (self.vertices, self.triangles, self.uv, self.vertex_normals, self.face_normals):
            if arr is not None:
                arr.setflags(write=False)
        return self

    @property
    def frozen(self) -> bool:
        return not self.vertices.flags.writeable

    @staticmethod
    def from_convex_hull(hull, winding: Winding = Winding.CW) -> "Mesh3":
        """Create a Mesh from a scipy.spatial.ConvexHull object."""
        vertices = np.asarray(hull.points, dtype=np.float64)
        center = np.mean(vertices[hull.vertices], axis=0)
        triangles = orient_outward(vertices, hull.simplices, winding, center)

        return Mesh3(vertices=vertices, triangles=triangles, winding=winding, name="ConvexHull")

    def __repr__(self):
        return (
            f"Mesh3(name={self.name!r}, vertices={self.get_vertex_count()}, "
            f"triangles={self.get_face_count()}, winding={self.winding.value})"
        )
