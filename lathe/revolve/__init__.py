"""
Генерация тела вращения по профилю радиуса.

Алгоритм:
1. Дискретизация профиля: радиус для каждого кольца
2. Сетка вершин (кольцо, сегмент) и UV
3. Сшивка треугольников, шов сегментов и крышки на концах
4. Нормали вершин и выпуклая оболочка
"""

from lathe.revolve.types import (
    GenerationParameters,
    GenerationResult,
    DegenerateParametersError,
    DEFAULT_RINGS,
    DEFAULT_SEGMENTS,
    DEFAULT_AXIS_SCALE,
)
from lathe.revolve.sampler import ProfileEvaluationError, sample_profile
from lathe.revolve.grid import build_grid
from lathe.revolve.stitcher import CAP_EPSILON, stitch
from lathe.revolve.finalizer import finalize
from lathe.revolve.generator import generate, generate_from_parameters

__all__ = [
    "GenerationParameters",
    "GenerationResult",
    "DegenerateParametersError",
    "ProfileEvaluationError",
    "DEFAULT_RINGS",
    "DEFAULT_SEGMENTS",
    "DEFAULT_AXIS_SCALE",
    "CAP_EPSILON",
    "sample_profile",
    "build_grid",
    "stitch",
    "finalize",
    "generate",
    "generate_from_parameters",
]
