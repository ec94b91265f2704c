"""
Force Reduction Tests

항력/양력 분해 및 공력 계수 계산 테스트
"""

import math

import numpy as np
import pytest

from aerosweep.config import AeroConfig
from aerosweep.reduction import ResultRow, dynamic_pressure, reduce, wind_axes


@pytest.fixture
def config():
    return AeroConfig(freestream_speed=16.0, density=1.225,
                      reference_area=0.4, reference_length=0.435)


@pytest.mark.parametrize("aoa", [-90.0, -12.5, -3.0, 0.0, 4.0, 17.25, 45.0, 135.0, 360.0])
def test_rotation_preserves_magnitude(aoa):
    fx, fy = 3.7, -11.2
    fd, fl = wind_axes(aoa, fx, fy)
    assert fd ** 2 + fl ** 2 == pytest.approx(fx ** 2 + fy ** 2, rel=1e-12)


def test_zero_aoa_is_identity(config):
    row = reduce(0.0, (1.5, -2.25, 0.75), (0.0, 0.0, 0.0), config)
    assert row.fd == 1.5
    assert row.fl == -2.25
    assert row.fz == 0.75


def test_sign_convention_at_ninety_degrees(config):
    row = reduce(90.0, (1.0, 0.0, 0.0), (0.0, 0.0, 0.0), config)
    assert row.fd == pytest.approx(0.0, abs=1e-12)
    assert row.fl == pytest.approx(-1.0, abs=1e-12)


def test_lift_is_positive_for_force_normal_to_freestream(config):
    a = math.radians(10.0)
    # unit force perpendicular to the freestream, rotated to body axes
    row = reduce(10.0, (-math.sin(a), math.cos(a), 0.0), (0.0, 0.0, 0.0), config)
    assert row.fd == pytest.approx(0.0, abs=1e-12)
    assert row.fl == pytest.approx(1.0)


def test_drag_coefficient_reference_case(config):
    q = dynamic_pressure(config.density, config.freestream_speed)
    assert q * config.reference_area == pytest.approx(62.72)

    row = reduce(0.0, (2.0, 0.0, 0.0), (0.0, 0.0, 0.0), config)
    assert row.fd == 2.0
    assert row.cd == pytest.approx(0.03189, abs=1e-5)
    assert row.cl == 0.0
    assert not row.degenerate


def test_moment_coefficients(config):
    row = reduce(3.0, (0.0, 0.0, 0.0), (1.0, -2.0, 0.5), config)
    denom = 62.72 * 0.435
    assert row.cmx == pytest.approx(1.0 / denom)
    assert row.cmy == pytest.approx(-2.0 / denom)
    assert row.cmz == pytest.approx(0.5 / denom)


def test_zero_reference_area_clamps_all_coefficients(caplog):
    config = AeroConfig(reference_area=0.0)
    row = reduce(7.0, (120.0, -40.0, 3.0), (5.0, 6.0, -7.0), config)

    assert (row.cd, row.cl, row.cmx, row.cmy, row.cmz) == (0.0, 0.0, 0.0, 0.0, 0.0)
    assert row.degenerate
    # dimensional quantities are still reported
    assert row.fx == 120.0
    assert row.mz == -7.0
    assert "Degenerate" in caplog.text


@pytest.mark.parametrize("field", ["density", "freestream_speed"])
def test_zero_dynamic_pressure_clamps(field):
    config = AeroConfig(**{field: 0.0})
    row = reduce(2.0, (1.0, 1.0, 0.0), (1.0, 1.0, 1.0), config)
    assert row.degenerate
    assert row.cd == row.cl == row.cmz == 0.0


def test_zero_reference_length_clamps_moments_only():
    config = AeroConfig(reference_length=0.0)
    row = reduce(0.0, (2.0, 0.0, 0.0), (1.0, 1.0, 1.0), config)
    assert row.degenerate
    assert row.cd == pytest.approx(0.03189, abs=1e-5)
    assert row.cmx == row.cmy == row.cmz == 0.0


def test_accepts_numpy_vectors(config):
    row = reduce(np.float64(5.0), np.array([1.0, 2.0, 3.0]), np.array([[4.0, 5.0, 6.0]]), config)
    assert isinstance(row.cd, float)
    assert row.values()[0] == 5.0
    assert row.mz == 6.0


def test_rejects_wrong_vector_length(config):
    with pytest.raises(ValueError, match="force"):
        reduce(0.0, (1.0, 2.0), (0.0, 0.0, 0.0), config)
    with pytest.raises(ValueError, match="moment"):
        reduce(0.0, (1.0, 2.0, 3.0), (0.0, 0.0, 0.0, 0.0), config)


def test_row_layout(config):
    row = reduce(4.0, (0.1, 0.2, 0.3), (0.4, 0.5, 0.6), config)
    assert len(ResultRow.FIELDS) == 14
    assert len(ResultRow.HEADER) == 14
    assert len(row.values()) == 14
    assert row.values()[:4] == (4.0, 0.1, 0.2, 0.3)
    assert row.as_dict()['degenerate'] is False
    assert row.message().startswith("AoA 4 deg: Fx=0.1 Fy=0.2 Fz=0.3")


def test_row_is_immutable(config):
    row = reduce(0.0, (1.0, 0.0, 0.0), (0.0, 0.0, 0.0), config)
    with pytest.raises(AttributeError):
        row.cd = 1.0
