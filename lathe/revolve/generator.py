"""
Генератор тела вращения.

Конвейер: профиль -> радиусы колец -> сетка вершин -> индексы -> нормали и оболочка.
Каждый этап только читает результат предыдущего.
"""

from __future__ import annotations

from lathe import log
from lathe.revolve.finalizer import finalize
from lathe.revolve.grid import build_grid
from lathe.revolve.sampler import sample_profile
from lathe.revolve.stitcher import stitch
from lathe.revolve.types import (
    DEFAULT_AXIS_SCALE,
    DEFAULT_RINGS,
    DEFAULT_SEGMENTS,
    GenerationParameters,
    GenerationResult,
    ProfileFunction,
)


def generate_from_parameters(params: GenerationParameters) -> GenerationResult:
    """
    Построить меш и выпуклую оболочку.

    Raises:
        DegenerateParametersError: rings/segments < 3 или плохой масштаб.
        ProfileEvaluationError: профиль вернул нечисловое значение.
        HullConstructionError: все вершины совпали в одну точку.
    """
    params.validate()
    rings, segments = params.rings, params.segments

    radii = sample_profile(params.profile, rings)
    log.debug(f"revolve: sampled {rings} radii, min={radii.min():.4g} max={radii.max():.4g}")

    vertices, uvs = build_grid(radii, params.axis_scale, segments)
    log.debug(f"revolve: built grid of {params.vertex_count} vertices")

    triangles = stitch(radii, segments)
    log.debug(f"revolve: stitched {len(triangles)} triangles")

    mesh, collider = finalize(vertices, uvs, triangles, mirrored=params.mirrored)
    log.info(
        f"revolve: generated {rings}x{segments} mesh, "
        f"{mesh.get_face_count()} triangles, hull of {collider.get_vertex_count()} vertices"
    )
    return GenerationResult(mesh, collider)


def generate(
    profile: ProfileFunction,
    axis_scale=DEFAULT_AXIS_SCALE,
    rings: int = DEFAULT_RINGS,
    segments: int = DEFAULT_SEGMENTS,
) -> GenerationResult:
    """
    Построить тело вращения профиля вокруг оси Y.

    Args:
        profile: функция t -> радиус, t в [0, 1]; t = 0 соответствует верху (y = +1).
        axis_scale: масштаб (sx, sy, sz).
        rings: количество колец, >= 3.
        segments: количество сегментов, >= 3.

    Returns:
        GenerationResult(mesh, collider), распаковывается как кортеж.
    """
    params = GenerationParameters(
        profile=profile,
        axis_scale=axis_scale,
        rings=rings,
        segments=segments,
    )
    return generate_from_parameters(params)
