"""Ready-made radius profiles, t in [0, 1] -> radius."""

from __future__ import annotations

import math

import numpy as np


def constant(radius: float = 1.0):
    """Cylinder."""
    def profile(t: float) -> float:
        return radius
    return profile


def linear(r0: float = 0.0, r1: float = 1.0):
    """Cone or frustum: r0 at the top ring, r1 at the bottom ring."""
    def profile(t: float) -> float:
        return r0 + (r1 - r0) * t
    return profile


def sphere(radius: float = 1.0):
    """Unit sphere along y = 1 - 2t: r = sqrt(1 - y^2)."""
    def profile(t: float) -> float:
        y = 1.0 - 2.0 * t
        return radius * math.sqrt(max(0.0, 1.0 - y * y))
    return profile


def sine(amplitude: float = 1.0):
    """sin(pi * t): closed at both poles, widest in the middle."""
    def profile(t: float) -> float:
        return amplitude * math.sin(math.pi * t)
    return profile


def bicone(radius: float = 0.5):
    """Two cones joined at the middle ring."""
    def profile(t: float) -> float:
        return 2.0 * radius * (t if t < 0.5 else 1.0 - t)
    return profile


def vase(neck: float = 0.35, belly: float = 0.8, foot: float = 0.5):
    """Open neck at the top, wide belly, flat foot at the bottom."""
    return from_samples([0.0, 0.2, 0.55, 0.9, 1.0], [neck, neck * 0.8, belly, foot * 1.1, foot])


def from_samples(ts, radii):
    """
    Piecewise-linear profile through (t, radius) pairs.

    ts must be increasing, values outside [ts[0], ts[-1]] are clamped to the ends.
    """
    ts = np.asarray(ts, dtype=np.float64)
    radii = np.asarray(radii, dtype=np.float64)
    if ts.shape != radii.shape or ts.ndim != 1 or len(ts) < 2:
        raise ValueError("from_samples: ts and radii must be 1-D arrays of equal length >= 2")
    if np.any(np.diff(ts) <= 0):
        raise ValueError("from_samples: ts must be strictly increasing")

    def profile(t: float) -> float:
        return float(np.interp(t, ts, radii))
    return profile
