"""
Модуль коллайдеров.

Содержит:
- ConvexHullCollider - выпуклая оболочка набора точек
- HullConstructionError - оболочку построить невозможно
"""

from lathe.colliders.convex_hull import ConvexHullCollider, HullConstructionError

__all__ = [
    'ConvexHullCollider',
    'HullConstructionError',
]
