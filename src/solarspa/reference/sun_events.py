# reference/sun_events.py

"""
Equation of time and sun rise / transit / set (SPA appendix A.2).

The procedure samples the apparent geocentric sun at 0h UT on the day before,
the day of, and the day after the requested date, estimates the transit and
rise/set day fractions from the middle sample, then refines them with a
quadratic interpolation of α and δ across the three days.

All times handed back to the caller are local decimal hours; when the sun
never reaches the refraction-adjusted horizon (polar day or night) every event
value is the sentinel ``NO_EVENT``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from . import angles
from .geocentric import GeocentricSun, geocentric_sun
from .refraction import SUN_RADIUS
from .time_scales import julian_day_0h

_log = logging.getLogger(__name__)

NO_EVENT = -99999.0
SIDEREAL_RATE = 360.985647  # degrees of sidereal time per UT day


# ============================================================
# Equation of time
# ============================================================

def sun_mean_longitude(jme: float) -> float:
    """M = 280.4664567 + 360007.6982779 jme + ... (degrees, [0,360))"""
    return angles.wrap_deg(
        280.4664567 + jme * (360007.6982779 + jme * (0.03032028 + jme * (
            1.0 / 49931.0 + jme * (-1.0 / 15300.0 + jme * (-1.0 / 2000000.0))))))


def equation_of_time(M_deg: float, alpha_deg: float, del_psi_deg: float, eps_deg: float) -> float:
    """E = 4 (M - 0.0057183 - α + Δψ cos ε), minutes"""
    return angles.wrap_minutes(
        4.0 * (M_deg - 0.0057183 - alpha_deg + del_psi_deg * math.cos(math.radians(eps_deg)))
    )


def equation_of_time_minutes(geo: GeocentricSun) -> float:
    return equation_of_time(
        sun_mean_longitude(geo.time.jme),
        geo.alpha_deg,
        geo.nutation.del_psi_deg,
        geo.eps_deg,
    )


# ============================================================
# Building blocks
# ============================================================

@dataclass(frozen=True)
class DayTriple:
    """One quantity sampled at 0h UT on three consecutive days."""
    prev: float
    cur: float
    next: float


@dataclass(frozen=True)
class EventSample:
    """Interpolated sun state at one candidate day fraction."""
    nu_deg: float           # sidereal time
    alpha_prime_deg: float  # interpolated right ascension
    delta_prime_deg: float  # interpolated declination
    H_prime_deg: float      # local hour angle, (-180,180]
    h_deg: float            # altitude


@dataclass(frozen=True)
class RiseTransitSet:
    sun_transit: float  # local hours
    sunrise: float
    sunset: float
    srha_deg: float     # sunrise hour angle
    ssha_deg: float     # sunset hour angle
    sta_deg: float      # sun transit altitude

    @property
    def has_events(self) -> bool:
        return self.sun_transit != NO_EVENT


POLAR = RiseTransitSet(NO_EVENT, NO_EVENT, NO_EVENT, NO_EVENT, NO_EVENT, NO_EVENT)


def approx_sun_transit_time(alpha0_deg: float, longitude: float, nu_deg: float) -> float:
    """m0 = (α0 - σ - ν) / 360  (not yet wrapped)"""
    return (alpha0_deg - longitude - nu_deg) / 360.0


def sun_hour_angle_at_rise_set(latitude: float, delta0_deg: float, h0_prime_deg: float) -> float:
    """
    H0 in [0,180), or NO_EVENT when |cos H0| > 1 (sun stays above or below
    the h0' altitude all day).
    """
    lat = math.radians(latitude)
    d0 = math.radians(delta0_deg)
    argument = (math.sin(math.radians(h0_prime_deg)) - math.sin(lat) * math.sin(d0)) / (
        math.cos(lat) * math.cos(d0)
    )
    if abs(argument) > 1.0:
        return NO_EVENT
    return angles.wrap_deg_180(math.degrees(math.acos(argument)))


def interpolate_day_triple(v: DayTriple, n: float) -> float:
    """
    Second-order interpolation at ``n`` days from the middle sample.

    A first difference of 2 or more means α crossed 360 -> 0 between samples;
    it is reduced to [0,1) first.
    """
    a = v.cur - v.prev
    b = v.next - v.cur
    if abs(a) >= 2.0:
        a = angles.frac01(a)
    if abs(b) >= 2.0:
        b = angles.frac01(b)
    return v.cur + n * (a + b + (b - a) * n) / 2.0


def rts_sun_altitude(latitude: float, delta_prime_deg: float, H_prime_deg: float) -> float:
    lat = math.radians(latitude)
    dp = math.radians(delta_prime_deg)
    return math.degrees(math.asin(angles.clamp_unit(
        math.sin(lat) * math.sin(dp) + math.cos(lat) * math.cos(dp) * math.cos(math.radians(H_prime_deg))
    )))


def event_sample(
    m: float,
    nu_deg: float,
    alpha: DayTriple,
    delta: DayTriple,
    longitude: float,
    latitude: float,
    delta_t: float,
) -> EventSample:
    nu_rts = nu_deg + SIDEREAL_RATE * m
    n = m + delta_t / 86400.0
    alpha_prime = interpolate_day_triple(alpha, n)
    delta_prime = interpolate_day_triple(delta, n)
    H_prime = angles.wrap_deg_pm180(nu_rts + longitude - alpha_prime)
    return EventSample(
        nu_deg=nu_rts,
        alpha_prime_deg=alpha_prime,
        delta_prime_deg=delta_prime,
        H_prime_deg=H_prime,
        h_deg=rts_sun_altitude(latitude, delta_prime, H_prime),
    )


def refine_rise_set(m: float, s: EventSample, latitude: float, h0_prime_deg: float) -> float:
    """R/S = m + (h - h0') / (360 cos δ' cos φ sin H')"""
    return m + (s.h_deg - h0_prime_deg) / (
        360.0
        * math.cos(math.radians(s.delta_prime_deg))
        * math.cos(math.radians(latitude))
        * math.sin(math.radians(s.H_prime_deg))
    )


# ============================================================
# Driver
# ============================================================

def sample_three_days(year: int, month: int, day: int) -> tuple[float, DayTriple, DayTriple]:
    """
    (ν at 0h UT of the date, α triple, δ triple), geocentric with ΔT = 0.
    """
    jd0 = julian_day_0h(year, month, day)
    prev = geocentric_sun(jd0 - 1.0, 0.0)
    cur = geocentric_sun(jd0, 0.0)
    nxt = geocentric_sun(jd0 + 1.0, 0.0)
    return (
        cur.nu_deg,
        DayTriple(prev.alpha_deg, cur.alpha_deg, nxt.alpha_deg),
        DayTriple(prev.delta_deg, cur.delta_deg, nxt.delta_deg),
    )


def rise_transit_set(
    year: int,
    month: int,
    day: int,
    *,
    longitude: float,
    latitude: float,
    delta_t: float = 0.0,
    timezone: float = 0.0,
    atmos_refract: float = 0.5667,
) -> RiseTransitSet:
    """Sun transit, sunrise and sunset (local hours) on a calendar date."""
    nu, alpha, delta = sample_three_days(year, month, day)

    m0 = approx_sun_transit_time(alpha.cur, longitude, nu)
    h0_prime = -(SUN_RADIUS + atmos_refract)
    h0 = sun_hour_angle_at_rise_set(latitude, delta.cur, h0_prime)

    if h0 < 0.0:
        _log.debug("no sunrise/sunset on %04d-%02d-%02d at latitude %.4f", year, month, day, latitude)
        return POLAR

    m_transit = angles.frac01(m0)
    m_rise = angles.frac01(m0 - h0 / 360.0)
    m_set = angles.frac01(m0 + h0 / 360.0)

    transit = event_sample(m_transit, nu, alpha, delta, longitude, latitude, delta_t)
    rise = event_sample(m_rise, nu, alpha, delta, longitude, latitude, delta_t)
    sset = event_sample(m_set, nu, alpha, delta, longitude, latitude, delta_t)

    return RiseTransitSet(
        sun_transit=angles.day_frac_to_local_hours(m_transit - transit.H_prime_deg / 360.0, timezone),
        sunrise=angles.day_frac_to_local_hours(refine_rise_set(m_rise, rise, latitude, h0_prime), timezone),
        sunset=angles.day_frac_to_local_hours(refine_rise_set(m_set, sset, latitude, h0_prime), timezone),
        srha_deg=rise.H_prime_deg,
        ssha_deg=sset.H_prime_deg,
        sta_deg=transit.h_deg,
    )
