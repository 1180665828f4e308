"""
Тесты для готовых профилей.
"""

import pytest

from lathe import profiles


class TestProfiles:

    def test_constant(self):
        p = profiles.constant(0.3)
        assert p(0.0) == p(0.5) == p(1.0) == 0.3

    def test_linear(self):
        p = profiles.linear(0.2, 0.6)
        assert p(0.0) == pytest.approx(0.2)
        assert p(0.5) == pytest.approx(0.4)
        assert p(1.0) == pytest.approx(0.6)

    def test_sphere_poles_and_equator(self):
        p = profiles.sphere()
        assert p(0.0) == 0.0
        assert p(1.0) == 0.0
        assert p(0.5) == pytest.approx(1.0)

    def test_sine(self):
        p = profiles.sine()
        assert p(0.0) == 0.0
        assert p(0.5) == pytest.approx(1.0)

    def test_bicone(self):
        p = profiles.bicone()
        assert p(0.0) == 0.0
        assert p(0.25) == pytest.approx(0.25)
        assert p(0.5) == pytest.approx(0.5)
        assert p(1.0) == 0.0

    def test_from_samples(self):
        p = profiles.from_samples([0.0, 0.5, 1.0], [1.0, 0.0, 1.0])
        assert p(0.25) == pytest.approx(0.5)
        assert p(0.5) == pytest.approx(0.0)
        assert isinstance(p(0.1), float)

    def test_from_samples_validation(self):
        with pytest.raises(ValueError):
            profiles.from_samples([0.0, 1.0], [1.0])
        with pytest.raises(ValueError):
            profiles.from_samples([0.0, 0.0], [1.0, 2.0])

    def test_vase_ends_open(self):
        p = profiles.vase()
        assert p(0.0) == pytest.approx(0.35)
        assert p(1.0) == pytest.approx(0.5)
