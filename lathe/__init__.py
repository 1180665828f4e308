"""
Lathe - процедурная генерация тел вращения.

Основные модули:
- revolve - профиль -> меш (вершины, UV, индексы, нормали)
- mesh - контейнер Mesh3 и раскладка вершин
- colliders - выпуклая оболочка для физики
- profiles - готовые функции профиля
"""

from .mesh import Mesh3, Winding
from .colliders import ConvexHullCollider, HullConstructionError
from .revolve import (
    GenerationParameters,
    GenerationResult,
    DegenerateParametersError,
    ProfileEvaluationError,
    generate,
    generate_from_parameters,
)

__version__ = '0.1.0'

__all__ = [
    'Mesh3',
    'Winding',
    'ConvexHullCollider',
    'HullConstructionError',
    'GenerationParameters',
    'GenerationResult',
    'DegenerateParametersError',
    'ProfileEvaluationError',
    'generate',
    'generate_from_parameters',
]
