# tests/test_cross_check.py
#
# Randomized comparison against pvlib's NREL SPA (nrel_numpy method), an
# independent implementation of the same published algorithm.

import random
from datetime import datetime, timedelta, timezone

import pytest

pvlib = pytest.importorskip("pvlib")
pd = pytest.importorskip("pandas")

from solarspa import SpaParams, calculate

TOL_DEG = 3e-4


def _angle_diff(a, b):
    return abs((a - b + 180.0) % 360.0 - 180.0)


def _random_params(rng):
    return SpaParams(
        year=rng.randint(1950, 2050), month=rng.randint(1, 12), day=rng.randint(1, 28),
        hour=rng.randint(0, 23), minute=rng.randint(0, 59), second=float(rng.randint(0, 59)),
        timezone=float(rng.randint(-12, 12)),
        delta_t=rng.uniform(30.0, 80.0),
        longitude=rng.uniform(-180.0, 180.0), latitude=rng.uniform(-89.0, 89.0),
        elevation=rng.uniform(0.0, 3000.0),
        pressure=rng.uniform(700.0, 1050.0), temperature=rng.uniform(-30.0, 40.0),
        slope=rng.uniform(0.0, 90.0), azm_rotation=rng.uniform(-180.0, 180.0),
    )


def _pvlib_position(p):
    when = datetime(p.year, p.month, p.day, p.hour, p.minute, int(p.second),
                    tzinfo=timezone(timedelta(hours=p.timezone)))
    times = pd.DatetimeIndex([when])
    location = pvlib.location.Location(latitude=p.latitude, longitude=p.longitude, altitude=p.elevation)
    pos = location.get_solarposition(
        times,
        pressure=p.pressure * 100.0,  # mbar -> Pa
        temperature=p.temperature,
        delta_t=p.delta_t,
        atmos_refract=p.atmos_refract,
    )
    zenith = float(pos["apparent_zenith"].iloc[0])
    azimuth = float(pos["azimuth"].iloc[0])
    aoi = float(pvlib.irradiance.aoi(p.slope, (180.0 + p.azm_rotation) % 360.0, zenith, azimuth))
    return zenith, azimuth, aoi


def test_matches_pvlib_spa_over_random_inputs():
    rng = random.Random(42)
    for _ in range(300):
        p = _random_params(rng)
        res = calculate(p, sun_events=False)
        zenith, azimuth, aoi = _pvlib_position(p)

        assert res.zenith == pytest.approx(zenith, abs=TOL_DEG), p
        assert _angle_diff(res.azimuth, azimuth) < TOL_DEG, p
        assert _angle_diff(res.azimuth_astro, azimuth - 180.0) < TOL_DEG, p
        assert res.incidence == pytest.approx(aoi, abs=TOL_DEG), p
