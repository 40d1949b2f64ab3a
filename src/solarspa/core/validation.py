from __future__ import annotations

import math
from typing import Optional

from .errors import InputRangeError
from .types import SpaParams


def _check(field: str, value: float, low: Optional[float], high: Optional[float], *,
           low_open: bool = False, high_open: bool = False) -> None:
    if not math.isfinite(value):
        raise InputRangeError(field, value, low, high, "not a finite number")
    bad = False
    if low is not None:
        bad = value <= low if low_open else value < low
    if not bad and high is not None:
        bad = value >= high if high_open else value > high
    if bad:
        parts = []
        if low_open:
            parts.append("lower bound exclusive")
        if high_open:
            parts.append("upper bound exclusive")
        raise InputRangeError(field, value, low, high, ", ".join(parts))


def validate_params(p: SpaParams, *, incidence: bool = True) -> None:
    """
    Raise InputRangeError for the first parameter outside its documented range.

    NaN and infinities are rejected for every field. Latitude is bounded to
    [-90, 90]; the refraction at the horizon only from above. Slope and surface
    azimuth rotation are checked only when the incidence angle is requested.
    """
    _check("year", p.year, -2000, 6000)
    _check("month", p.month, 1, 12)
    _check("day", p.day, 1, 31)
    _check("hour", p.hour, 0, 24)
    _check("minute", p.minute, 0, 59)
    _check("second", p.second, 0, 60, high_open=True)
    if p.hour == 24 and (p.minute > 0 or p.second > 0):
        raise InputRangeError("hour", p.hour, 0, 24, "hour 24 only allowed at 24:00:00")
    _check("timezone", p.timezone, -18, 18)
    _check("delta_ut1", p.delta_ut1, -1, 1, low_open=True, high_open=True)
    _check("delta_t", p.delta_t, -8000, 8000)
    _check("longitude", p.longitude, -180, 180)
    _check("latitude", p.latitude, -90, 90)
    _check("elevation", p.elevation, -6500000, None)
    _check("pressure", p.pressure, 0, 5000)
    _check("temperature", p.temperature, -273, 6000, low_open=True)
    _check("atmos_refract", p.atmos_refract, None, 5)
    if incidence:
        _check("slope", p.slope, -360, 360)
        _check("azm_rotation", p.azm_rotation, -360, 360)
