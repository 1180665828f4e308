"""
Базовые структуры данных для генерации тела вращения.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, NamedTuple, Tuple

if TYPE_CHECKING:
    from lathe.colliders.convex_hull import ConvexHullCollider
    from lathe.mesh.mesh import Mesh3


ProfileFunction = Callable[[float], float]
"""Профиль: t в [0, 1] -> радиус (ожидается в [0, 1])."""

DEFAULT_RINGS = 9
DEFAULT_SEGMENTS = 9
DEFAULT_AXIS_SCALE = (1.0, 1.0, 1.0)

MIN_RINGS = 3
MIN_SEGMENTS = 3


class DegenerateParametersError(ValueError):
    """Ring/segment counts or axis scale that cannot produce a closed grid."""


@dataclass(frozen=True)
class GenerationParameters:
    """Параметры одного вызова генератора."""

    profile: ProfileFunction
    """Функция радиуса, вызывается ровно rings раз."""

    axis_scale: Tuple[float, float, float] = DEFAULT_AXIS_SCALE
    """Масштаб по осям (x, y, z). Ось вращения Y."""

    rings: int = DEFAULT_RINGS
    """Количество колец вдоль оси, не меньше 3."""

    segments: int = DEFAULT_SEGMENTS
    """Количество сегментов по окружности, не меньше 3."""

    def validate(self) -> "GenerationParameters":
        """
        Проверить параметры до начала построения буферов.

        Raises:
            DegenerateParametersError: если rings/segments < 3 или масштаб некорректен.
        """
        if not callable(self.profile):
            raise DegenerateParametersError("GenerationParameters: profile must be callable")
        for name, value, minimum in (
            ("rings", self.rings, MIN_RINGS),
            ("segments", self.segments, MIN_SEGMENTS),
        ):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise DegenerateParametersError(
                    f"GenerationParameters: {name} must be an integer, got {value!r}"
                )
            if value < minimum:
                raise DegenerateParametersError(
                    f"GenerationParameters: {name} must be >= {minimum}, got {value}"
                )
        try:
            scale = [float(s) for s in self.axis_scale]
        except (TypeError, ValueError) as e:
            raise DegenerateParametersError(
                f"GenerationParameters: axis_scale must be three finite numbers, got {self.axis_scale!r}"
            ) from e
        if len(scale) != 3 or not all(math.isfinite(s) for s in scale):
            raise DegenerateParametersError(
                f"GenerationParameters: axis_scale must be three finite numbers, got {self.axis_scale!r}"
            )
        return self

    @property
    def vertex_count(self) -> int:
        return self.rings * self.segments

    @property
    def mirrored(self) -> bool:
        """Нечётное число отрицательных компонент масштаба отражает сетку."""
        return sum(1 for s in self.axis_scale if float(s) < 0) % 2 == 1

    def to_dict(self) -> dict:
        """Serialize numeric fields. The profile callable is not serialized."""
        return {
            "axis_scale": [float(s) for s in self.axis_scale],
            "rings": self.rings,
            "segments": self.segments,
        }

    @staticmethod
    def from_dict(data: dict, profile: ProfileFunction) -> "GenerationParameters":
        """Deserialize from dictionary, the profile is supplied by the caller."""
        return GenerationParameters(
            profile=profile,
            axis_scale=tuple(data.get("axis_scale", DEFAULT_AXIS_SCALE)),
            rings=data.get("rings", DEFAULT_RINGS),
            segments=data.get("segments", DEFAULT_SEGMENTS),
        )


class GenerationResult(NamedTuple):
    """Результат генерации: поверхность и её выпуклая оболочка."""

    mesh: "Mesh3"
    collider: "ConvexHullCollider"
