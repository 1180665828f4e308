"""
Тесты для сетки вершин.
"""

import numpy as np

from lathe.revolve.grid import build_grid


class TestBuildGrid:

    def test_shapes(self):
        vertices, uvs = build_grid(np.ones(5), (1, 1, 1), 7)
        assert vertices.shape == (35, 3)
        assert uvs.shape == (35, 2)

    def test_first_ring_positions(self):
        """u = 1 - j/segments, theta = 2*pi*u, первое кольцо на y = +1."""
        vertices, _ = build_grid(np.ones(3), (1, 1, 1), 4)
        expected = np.array([
            [1.0, 1.0, 0.0],
            [0.0, 1.0, -1.0],
            [-1.0, 1.0, 0.0],
            [0.0, 1.0, 1.0],
        ])
        np.testing.assert_allclose(vertices[:4], expected, atol=1e-12)

    def test_axial_positions(self):
        """Ось идёт от +1 у первого кольца до -1 у последнего."""
        vertices, _ = build_grid(np.ones(5), (1, 1, 1), 3)
        ys = vertices[::3, 1]
        np.testing.assert_allclose(ys, [1.0, 0.5, 0.0, -0.5, -1.0])

    def test_uvs(self):
        _, uvs = build_grid(np.ones(3), (1, 1, 1), 4)
        # кольцо 1, сегмент 1
        np.testing.assert_allclose(uvs[5], [0.75, 0.5])
        np.testing.assert_allclose(uvs[0], [1.0, 0.0])
        np.testing.assert_allclose(uvs[-1], [0.25, 1.0])

    def test_radius_per_ring(self):
        radii = np.array([0.2, 0.7, 0.4])
        vertices, _ = build_grid(radii, (1, 1, 1), 6)
        r = np.hypot(vertices[:, 0], vertices[:, 2]).reshape(3, 6)
        np.testing.assert_allclose(r, np.repeat(radii[:, None], 6, axis=1))

    def test_seam_not_duplicated(self):
        """Вершины кольца попарно различны: j = segments не создаётся."""
        vertices, _ = build_grid(np.ones(3), (1, 1, 1), 8)
        ring = vertices[:8]
        distances = np.linalg.norm(ring[:, None, :] - ring[None, :, :], axis=2)
        off_diagonal = distances[~np.eye(8, dtype=bool)]
        assert off_diagonal.min() > 1e-6

    def test_scale_is_componentwise(self):
        radii = np.array([0.3, 1.0, 0.6, 0.1])
        unit, uv_unit = build_grid(radii, (1, 1, 1), 5)
        scaled, uv_scaled = build_grid(radii, (2.0, 3.0, 0.5), 5)
        np.testing.assert_allclose(scaled, unit * np.array([2.0, 3.0, 0.5]))
        np.testing.assert_allclose(uv_scaled, uv_unit)
