"""
Тесты для дискретизации профиля.
"""

import math

import numpy as np
import pytest

from lathe.revolve.sampler import ProfileEvaluationError, ring_parameters, sample_profile


class ProfileBroken(Exception):
    pass


class TestRingParameters:

    def test_endpoints_exact(self):
        ts = ring_parameters(5)
        np.testing.assert_allclose(ts, [0.0, 0.25, 0.5, 0.75, 1.0])
        assert ts[0] == 0.0
        assert ts[-1] == 1.0

    def test_length(self):
        assert len(ring_parameters(3)) == 3
        assert len(ring_parameters(17)) == 17


class TestSampleProfile:

    def test_called_once_per_ring(self):
        calls = []

        def profile(t):
            calls.append(t)
            return 0.5

        radii = sample_profile(profile, 4)
        assert calls == pytest.approx([0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0])
        assert all(isinstance(t, float) for t in calls)
        np.testing.assert_allclose(radii, [0.5] * 4)

    def test_values(self):
        radii = sample_profile(lambda t: t * t, 3)
        np.testing.assert_allclose(radii, [0.0, 0.25, 1.0])

    def test_read_only(self):
        radii = sample_profile(lambda t: 1.0, 3)
        assert not radii.flags.writeable
        with pytest.raises(ValueError):
            radii[0] = 2.0

    def test_exception_propagates_unchanged(self):
        error = ProfileBroken("boom")

        def profile(t):
            if t > 0.5:
                raise error
            return 1.0

        with pytest.raises(ProfileBroken) as info:
            sample_profile(profile, 5)
        assert info.value is error

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, bad):
        with pytest.raises(ProfileEvaluationError) as info:
            sample_profile(lambda t: bad if t == 1.0 else 0.5, 3)
        assert info.value.t == 1.0

    def test_not_a_number(self):
        with pytest.raises(ProfileEvaluationError) as info:
            sample_profile(lambda t: None, 3)
        assert info.value.t == 0.0
        assert info.value.value is None

    def test_error_is_value_error(self):
        assert issubclass(ProfileEvaluationError, ValueError)
