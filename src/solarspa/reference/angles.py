from __future__ import annotations

import math


# ------------------------------------------------------------
# Range reduction
#
# Each reducer returns its argument untouched when it already lies in the
# target range, so reducing twice gives back the same float. Otherwise it
# follows the floor-based reduction of the published algorithm.
# ------------------------------------------------------------

def wrap_deg(deg: float) -> float:
    """Wrap degrees to [0,360)."""
    if 0.0 <= deg < 360.0:
        return deg
    x = deg / 360.0
    y = 360.0 * (x - math.floor(x))
    if y < 0.0:
        y += 360.0
    # x - floor(x) can round up to exactly 1.0 for tiny negative inputs
    return y if y < 360.0 else 0.0


def wrap_deg_pm180(deg: float) -> float:
    """Wrap degrees to (-180,180]."""
    if -180.0 < deg <= 180.0:
        return deg
    x = deg / 360.0
    y = 360.0 * (x - math.floor(x))
    if y < -180.0:
        y += 360.0
    if y > 180.0:
        y -= 360.0
    return y


def wrap_deg_180(deg: float) -> float:
    """Wrap degrees to [0,180)."""
    if 0.0 <= deg < 180.0:
        return deg
    x = deg / 180.0
    y = 180.0 * (x - math.floor(x))
    if y < 0.0:
        y += 180.0
    return y if y < 180.0 else 0.0


def frac01(x: float) -> float:
    """Return fractional part in [0,1)."""
    if 0.0 <= x < 1.0:
        return x
    y = x - math.floor(x)
    if y < 0.0:
        y += 1.0
    return y if y < 1.0 else 0.0


def wrap_minutes(minutes: float) -> float:
    """
    Fold a time difference in minutes back into the (-20, 20) window by one
    day (1440 min). Used for the equation of time, which never exceeds ~17 min
    in magnitude but can come out a full day off after the longitude wrap.
    """
    if minutes < -20.0:
        minutes += 1440.0
    if minutes > 20.0:
        minutes -= 1440.0
    return minutes


def day_frac_to_local_hours(day_frac: float, tz_hours: float) -> float:
    """UT day fraction -> local decimal hours in [0,24)."""
    return 24.0 * frac01(day_frac + tz_hours / 24.0)


# ------------------------------------------------------------
# Small numeric helpers
# ------------------------------------------------------------

def clamp_unit(x: float) -> float:
    """Clamp to [-1,1] before asin/acos of a mathematically bounded expression."""
    if x > 1.0:
        return 1.0
    if x < -1.0:
        return -1.0
    return x


def third_order_polynomial(a: float, b: float, c: float, d: float, x: float) -> float:
    """a*x^3 + b*x^2 + c*x + d (Horner)."""
    return ((a * x + b) * x + c) * x + d
