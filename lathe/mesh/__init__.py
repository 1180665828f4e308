"""Mesh module - Mesh3, Winding, vertex layout."""

from lathe.mesh.mesh import (
    Mesh3,
    Winding,
    VertexAttribType,
    VertexAttribute,
    VertexLayout,
    face_normals,
    orient_outward,
)

__all__ = [
    "Mesh3",
    "Winding",
    "VertexAttribType",
    "VertexAttribute",
    "VertexLayout",
    "face_normals",
    "orient_outward",
]
