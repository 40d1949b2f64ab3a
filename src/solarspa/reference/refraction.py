"""
Topocentric elevation and the atmospheric refraction correction.

Refraction is modelled with the single Bennett-style term used by SPA; it is
applied only while the uncorrected elevation is above -(sun radius + refraction
at the horizon), below that the correction is exactly zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import angles


SUN_RADIUS = 0.26667  # apparent angular radius of the sun (degrees)


@dataclass(frozen=True)
class RefractedElevation:
    e0_deg: float     # topocentric elevation, no refraction
    del_e_deg: float  # refraction correction
    e_deg: float      # topocentric elevation, corrected


def topocentric_elevation_angle(latitude: float, delta_prime_deg: float, H_prime_deg: float) -> float:
    lat = math.radians(latitude)
    dp = math.radians(delta_prime_deg)
    return math.degrees(math.asin(angles.clamp_unit(
        math.sin(lat) * math.sin(dp)
        + math.cos(lat) * math.cos(dp) * math.cos(math.radians(H_prime_deg))
    )))


def atmospheric_refraction_correction(
    pressure: float,
    temperature: float,
    atmos_refract: float,
    e0_deg: float,
) -> float:
    if e0_deg < -(SUN_RADIUS + atmos_refract):
        return 0.0
    kelvin = 273.0 + temperature
    if kelvin == 0.0:
        # the density factor 283/T has no finite value at absolute zero
        return 0.0
    return (
        (pressure / 1010.0)
        * (283.0 / kelvin)
        * 1.02
        / (60.0 * math.tan(math.radians(e0_deg + 10.3 / (e0_deg + 5.11))))
    )


def refracted_elevation(
    latitude: float,
    delta_prime_deg: float,
    H_prime_deg: float,
    pressure: float,
    temperature: float,
    atmos_refract: float,
) -> RefractedElevation:
    e0 = topocentric_elevation_angle(latitude, delta_prime_deg, H_prime_deg)
    del_e = atmospheric_refraction_correction(pressure, temperature, atmos_refract, e0)
    return RefractedElevation(e0_deg=e0, del_e_deg=del_e, e_deg=e0 + del_e)
