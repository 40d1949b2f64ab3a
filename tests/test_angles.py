# tests/test_angles.py

import pytest
import random

from solarspa.reference import angles


def test_wrap_deg_basic():
    assert angles.wrap_deg(0.0) == 0.0
    assert angles.wrap_deg(360.0) == 0.0
    assert angles.wrap_deg(720.5) == pytest.approx(0.5, abs=1e-9)
    assert angles.wrap_deg(-90.0) == pytest.approx(270.0, abs=1e-12)
    # tiny negative value must not round up to 360
    assert 0.0 <= angles.wrap_deg(-1e-20) < 360.0


def test_wrap_deg_pm180_basic():
    assert angles.wrap_deg_pm180(180.0) == 180.0
    assert angles.wrap_deg_pm180(-180.0) == pytest.approx(180.0, abs=1e-12)
    assert angles.wrap_deg_pm180(190.0) == pytest.approx(-170.0, abs=1e-9)
    assert angles.wrap_deg_pm180(-190.0) == pytest.approx(170.0, abs=1e-9)


def test_wrap_deg_180_basic():
    assert angles.wrap_deg_180(200.0) == pytest.approx(20.0, abs=1e-9)
    assert angles.wrap_deg_180(-20.0) == pytest.approx(160.0, abs=1e-9)
    assert angles.wrap_deg_180(180.0) == 0.0


def test_frac01_basic():
    assert angles.frac01(-0.25) == pytest.approx(0.75, abs=1e-12)
    assert angles.frac01(3.5) == pytest.approx(0.5, abs=1e-12)
    assert angles.frac01(1.0) == 0.0


def test_reducers_ranges_and_idempotence():
    random.seed(42)
    for _ in range(20000):
        x = random.uniform(-1e6, 1e6)

        a = angles.wrap_deg(x)
        assert 0.0 <= a < 360.0
        assert angles.wrap_deg(a) == a

        b = angles.wrap_deg_pm180(x)
        assert -180.0 < b <= 180.0
        assert angles.wrap_deg_pm180(b) == b

        c = angles.wrap_deg_180(x)
        assert 0.0 <= c < 180.0
        assert angles.wrap_deg_180(c) == c

        f = angles.frac01(x / 360.0)
        assert 0.0 <= f < 1.0
        assert angles.frac01(f) == f


def test_wrap_minutes_window():
    assert angles.wrap_minutes(10.0) == 10.0
    assert angles.wrap_minutes(-15.0) == -15.0
    assert angles.wrap_minutes(1439.0) == pytest.approx(-1.0, abs=1e-12)
    assert angles.wrap_minutes(-1430.0) == pytest.approx(10.0, abs=1e-12)


def test_day_frac_to_local_hours():
    # 19:30 UT at UTC-7 is 12:30 local
    assert angles.day_frac_to_local_hours(19.5 / 24.0, -7.0) == pytest.approx(12.5, abs=1e-9)
    # crossing midnight
    assert angles.day_frac_to_local_hours(0.0, -4.0) == pytest.approx(20.0, abs=1e-9)
    assert angles.day_frac_to_local_hours(1.1, 0.0) == pytest.approx(2.4, abs=1e-9)


def test_clamp_unit_and_polynomial():
    assert angles.clamp_unit(1.0000000001) == 1.0
    assert angles.clamp_unit(-1.5) == -1.0
    assert angles.clamp_unit(0.3) == 0.3
    # 2x^3 - x^2 + 3x + 5 at x = 2
    assert angles.third_order_polynomial(2.0, -1.0, 3.0, 5.0, 2.0) == 23.0
