import math
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest

from modules.coord_transform import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    bd09_to_wgs84_exact,
    compute_offset,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    gcj02_to_wgs84_exact,
    is_outside_obfuscation_region,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)

# Reference point inside the obfuscation region; GCJ-02 values match coordTransform_py,
# BD-09 values are the closed-form polar transform evaluated at this point
REF_LNG, REF_LAT = 128.543, 37.065
SHENZHEN = (114.397433, 22.909235)


@pytest.mark.parametrize(
    "lng, lat, outside",
    [
        (73.66, 30.0, True),
        (73.661, 30.0, False),
        (135.05, 30.0, True),
        (135.049, 30.0, False),
        (100.0, 3.86, True),
        (100.0, 3.861, False),
        (100.0, 53.55, True),
        (100.0, 53.549, False),
        (0.0, 0.0, True),
        (SHENZHEN[0], SHENZHEN[1], False),
    ],
)
def test_region_gate_bounds_are_exclusive(lng, lat, outside):
    assert is_outside_obfuscation_region(lng, lat) is outside


def test_region_gate_treats_nan_as_outside():
    assert is_outside_obfuscation_region(math.nan, 30.0) is True
    assert is_outside_obfuscation_region(110.0, math.nan) is True


def test_wgs84_to_gcj02_reference_value():
    lng, lat = wgs84_to_gcj02(REF_LNG, REF_LAT)
    assert lng == pytest.approx(128.54820547949757, abs=1e-8)
    assert lat == pytest.approx(37.065651049489816, abs=1e-8)


def test_gcj02_to_wgs84_reference_value():
    lng, lat = gcj02_to_wgs84(REF_LNG, REF_LAT)
    assert lng == pytest.approx(128.53779452050244, abs=1e-8)
    assert lat == pytest.approx(37.06434895051018, abs=1e-8)


def test_gcj02_bd09_reference_values():
    assert gcj02_to_bd09(REF_LNG, REF_LAT) == pytest.approx((128.54944656269413, 37.07113427883019), abs=1e-8)
    assert bd09_to_gcj02(REF_LNG, REF_LAT) == pytest.approx((128.5365893261212, 37.058754503281534), abs=1e-8)


def test_gcj02_to_bd09_shenzhen_value():
    assert gcj02_to_bd09(*SHENZHEN) == pytest.approx((114.40395, 22.91510), abs=1e-5)


def test_wgs84_bd09_reference_values():
    assert wgs84_to_bd09(REF_LNG, REF_LAT) == pytest.approx((128.55468192918485, 37.07168344938498), abs=1e-8)
    assert bd09_to_wgs84(REF_LNG, REF_LAT) == pytest.approx((128.53136876750008, 37.0580926428705), abs=1e-8)


def test_offset_is_additive_perturbation():
    d_lng, d_lat = compute_offset(*SHENZHEN)
    assert wgs84_to_gcj02(*SHENZHEN) == (SHENZHEN[0] + d_lng, SHENZHEN[1] + d_lat)
    # GCJ-02 offsets are a few hundred meters
    assert 0 < abs(d_lng) < 0.01
    assert 0 < abs(d_lat) < 0.01


@pytest.mark.parametrize("lng, lat", [(10.0, 30.0), (-73.99, 40.73), (73.0, 30.0), (139.69, 35.68)])
def test_wgs84_to_gcj02_passthrough_outside_region(lng, lat):
    assert wgs84_to_gcj02(lng, lat) == (lng, lat)
    assert gcj02_to_wgs84(lng, lat) == (lng, lat)
    assert gcj02_to_wgs84_exact(lng, lat) == (lng, lat)


def test_outside_region_points_are_left_alone_on_gated_path():
    assert wgs84_to_gcj02(0, 0) == (0.0, 0.0)
    assert gcj02_to_wgs84(0, 0) == (0.0, 0.0)
    # BD-09 is never gated
    assert wgs84_to_bd09(0, 0) == gcj02_to_bd09(0, 0)
    assert wgs84_to_bd09(0, 0) != (0.0, 0.0)


@pytest.mark.parametrize("lng, lat", [SHENZHEN, (116.404, 39.915), (121.4737, 31.2304), (87.6, 43.8)])
def test_gcj02_round_trip_is_approximate(lng, lat):
    back_lng, back_lat = gcj02_to_wgs84(*wgs84_to_gcj02(lng, lat))
    assert abs(back_lng - lng) < 1e-4
    assert abs(back_lat - lat) < 1e-4
    assert (back_lng, back_lat) != (lng, lat)


@pytest.mark.parametrize("lng, lat", [SHENZHEN, (116.404, 39.915), (121.4737, 31.2304), (0.0, 0.0), (-120.5, -45.25)])
def test_bd09_round_trip(lng, lat):
    back_lng, back_lat = bd09_to_gcj02(*gcj02_to_bd09(lng, lat))
    assert back_lng == pytest.approx(lng, abs=1e-6)
    assert back_lat == pytest.approx(lat, abs=1e-6)


@pytest.mark.parametrize("lng, lat", [SHENZHEN, (116.404, 39.915), (121.4737, 31.2304)])
def test_exact_inverse_is_at_least_as_close_as_reflection(lng, lat):
    gcj = wgs84_to_gcj02(lng, lat)
    approx_back = gcj02_to_wgs84(*gcj)
    exact_back = gcj02_to_wgs84_exact(*gcj)

    assert exact_back == pytest.approx((lng, lat), abs=1e-5)
    approx_err = max(abs(approx_back[0] - lng), abs(approx_back[1] - lat))
    exact_err = max(abs(exact_back[0] - lng), abs(exact_back[1] - lat))
    assert exact_err <= approx_err
    # converged: re-encoding hits the target
    assert wgs84_to_gcj02(*exact_back) == pytest.approx(gcj, abs=2e-6)


def test_exact_inverse_single_iteration_equals_reflection():
    gcj = wgs84_to_gcj02(*SHENZHEN)
    assert gcj02_to_wgs84_exact(*gcj, max_iter=1) == pytest.approx(gcj02_to_wgs84(*gcj), abs=1e-12)


def test_bd09_to_wgs84_exact_composes_gcj_inverse():
    bd = wgs84_to_bd09(*SHENZHEN)
    assert bd09_to_wgs84_exact(*bd) == gcj02_to_wgs84_exact(*bd09_to_gcj02(*bd))
    assert bd09_to_wgs84_exact(*bd) == pytest.approx(SHENZHEN, abs=1e-4)


def test_numeric_strings_are_coerced():
    assert wgs84_to_gcj02("114.397433", "22.909235") == wgs84_to_gcj02(*SHENZHEN)


def test_nan_and_infinity_propagate_without_raising():
    assert all(math.isnan(v) for v in gcj02_to_bd09(math.nan, 30.0))
    assert any(math.isnan(v) for v in gcj02_to_bd09(math.inf, 0.0))
    assert all(math.isnan(v) for v in compute_offset(math.inf, 30.0))
    # NaN falls outside the gate and passes through
    lng, lat = wgs84_to_gcj02(math.nan, 30.0)
    assert math.isnan(lng) and lat == 30.0
