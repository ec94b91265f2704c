"""
Inlet Velocity Profile Tests
"""

import numpy as np
import pytest

from aerosweep.aoa_store import AoAStore
from aerosweep.profiles import InletVelocityProfile, fill_uniform, velocity_components


def test_velocity_components_thirty_degrees():
    u, v = velocity_components(30.0, 16.0)
    assert u == pytest.approx(13.856, abs=1e-3)
    assert v == pytest.approx(8.0, abs=1e-12)


def test_velocity_magnitude_is_speed():
    for aoa in np.linspace(-20, 20, 9):
        u, v = velocity_components(aoa, 16.0)
        assert np.hypot(u, v) == pytest.approx(16.0)


def test_fill_uniform_in_place():
    faces = np.zeros(5)
    out = fill_uniform(faces, 3.25)
    assert out is faces
    np.testing.assert_array_equal(faces, np.full(5, 3.25))


def test_fill_uniform_from_count():
    out = fill_uniform(4, -1.0)
    assert out.shape == (4,)
    assert np.all(out == -1.0)
    with pytest.raises(ValueError):
        fill_uniform(-1, 0.0)


def test_profile_rereads_store_each_call(tmp_path):
    store = AoAStore(tmp_path / "aoa.txt")
    profile = InletVelocityProfile(store, speed=16.0)

    store.write(0.0)
    u0 = profile.u_profile(3)
    np.testing.assert_allclose(u0, 16.0)
    np.testing.assert_allclose(profile.v_profile(3), 0.0, atol=1e-12)

    store.write(30.0)
    u1 = profile.u_profile(np.empty(3))
    v1 = profile.v_profile(np.empty(3))
    np.testing.assert_allclose(u1, 13.8564, atol=1e-4)
    np.testing.assert_allclose(v1, 8.0)


def test_profile_keeps_last_value_when_store_breaks(tmp_path):
    path = tmp_path / "aoa.txt"
    store = AoAStore(path)
    profile = InletVelocityProfile(store, speed=10.0)

    store.write(90.0)
    profile.v_profile(2)

    path.write_text("")
    v = profile.v_profile(2)
    np.testing.assert_allclose(v, 10.0)
    assert store.fallback_count == 1
