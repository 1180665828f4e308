"""
Дискретизация профиля: радиус для каждого кольца.
"""

from __future__ import annotations

import math

import numpy as np

from lathe.revolve.types import ProfileFunction


class ProfileEvaluationError(ValueError):
    """Profile returned a value that is not a finite real number."""

    def __init__(self, t: float, value):
        super().__init__(f"Profile returned non-finite radius {value!r} at t={t}")
        self.t = t
        self.value = value


def ring_parameters(rings: int) -> np.ndarray:
    """Параметры t_i = i / (rings - 1): ровно от 0.0 до 1.0 включительно."""
    return np.array([i / (rings - 1) for i in range(rings)], dtype=np.float64)


def sample_profile(profile: ProfileFunction, rings: int) -> np.ndarray:
    """
    Вычислить таблицу радиусов.

    Профиль вызывается ровно rings раз, по порядку колец. Исключение
    из профиля пробрасывается без изменений.

    Returns:
        Неизменяемый np.ndarray shape (rings,).

    Raises:
        ProfileEvaluationError: профиль вернул NaN, inf или не число.
    """
    radii = np.empty(rings, dtype=np.float64)
    for i, t in enumerate(ring_parameters(rings)):
        t = float(t)
        value = profile(t)
        try:
            radius = float(value)
        except (TypeError, ValueError) as e:
            raise ProfileEvaluationError(t, value) from e
        if not math.isfinite(radius):
            raise ProfileEvaluationError(t, value)
        radii[i] = radius
    radii.setflags(write=False)
    return radii
