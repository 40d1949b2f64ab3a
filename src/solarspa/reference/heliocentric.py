# reference/heliocentric.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import angles
from .terms import B_TERMS, L_TERMS, R_TERMS, TermGroup, TermSeries


@dataclass(frozen=True)
class HeliocentricPosition:
    """Earth as seen from the Sun."""
    L_deg: float  # longitude, [0,360)
    B_deg: float  # latitude
    R_au: float   # radius vector


@dataclass(frozen=True)
class GeocentricEcliptic:
    """Sun as seen from the Earth's centre (geometric, before nutation/aberration)."""
    theta_deg: float
    beta_deg: float


def periodic_term_sum(group: TermGroup, jme: float) -> float:
    """Σ A cos(B + C·jme)"""
    return sum(t.amplitude * math.cos(t.phase + t.frequency * jme) for t in group)


def evaluate_series(series: TermSeries, jme: float) -> float:
    """
    Σ_i (Σ_j A_ij cos(B_ij + C_ij·jme)) · jme^i, scaled by 1e-8.

    The tables carry amplitudes in units of 1e-8 rad (or AU).
    """
    total = 0.0
    for i, group in enumerate(series):
        total += periodic_term_sum(group, jme) * jme ** i
    return total / 1e8


def earth_heliocentric_longitude(jme: float) -> float:
    return angles.wrap_deg(math.degrees(evaluate_series(L_TERMS, jme)))


def earth_heliocentric_latitude(jme: float) -> float:
    return math.degrees(evaluate_series(B_TERMS, jme))


def earth_radius_vector(jme: float) -> float:
    return evaluate_series(R_TERMS, jme)


def heliocentric_position(jme: float) -> HeliocentricPosition:
    return HeliocentricPosition(
        L_deg=earth_heliocentric_longitude(jme),
        B_deg=earth_heliocentric_latitude(jme),
        R_au=earth_radius_vector(jme),
    )


def geocentric_longitude(L_deg: float) -> float:
    theta = L_deg + 180.0
    if theta >= 360.0:
        theta -= 360.0
    return theta


def geocentric_latitude(B_deg: float) -> float:
    return -B_deg


def to_geocentric(helio: HeliocentricPosition) -> GeocentricEcliptic:
    return GeocentricEcliptic(
        theta_deg=geocentric_longitude(helio.L_deg),
        beta_deg=geocentric_latitude(helio.B_deg),
    )
