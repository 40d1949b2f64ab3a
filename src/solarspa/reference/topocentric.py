from __future__ import annotations

import math
from dataclasses import dataclass

from . import angles


EARTH_RADIUS_M = 6378140.0
EARTH_FLATTENING_RATIO = 0.99664719  # b/a


@dataclass(frozen=True)
class RightAscensionParallax:
    del_alpha_deg: float  # parallax in the sun right ascension
    delta_prime_deg: float  # topocentric declination


@dataclass(frozen=True)
class TopocentricSun:
    H_deg: float            # observer (geocentric) local hour angle
    xi_deg: float           # equatorial horizontal parallax
    del_alpha_deg: float
    delta_prime_deg: float
    alpha_prime_deg: float  # topocentric right ascension
    H_prime_deg: float      # topocentric local hour angle


def observer_hour_angle(nu_deg: float, longitude: float, alpha_deg: float) -> float:
    """H = ν + σ - α, wrapped to [0,360)"""
    return angles.wrap_deg(nu_deg + longitude - alpha_deg)


def sun_equatorial_horizontal_parallax(R_au: float) -> float:
    """ξ = 8.794" / (3600 R)"""
    return 8.794 / (3600.0 * R_au)


def right_ascension_parallax_and_topocentric_dec(
    latitude: float,
    elevation: float,
    xi_deg: float,
    H_deg: float,
    delta_deg: float,
) -> RightAscensionParallax:
    lat = math.radians(latitude)
    xi = math.radians(xi_deg)
    h = math.radians(H_deg)
    delta = math.radians(delta_deg)

    u = math.atan(EARTH_FLATTENING_RATIO * math.tan(lat))
    y = EARTH_FLATTENING_RATIO * math.sin(u) + elevation * math.sin(lat) / EARTH_RADIUS_M
    x = math.cos(u) + elevation * math.cos(lat) / EARTH_RADIUS_M

    denom = math.cos(delta) - x * math.sin(xi) * math.cos(h)
    del_alpha = math.atan2(-x * math.sin(xi) * math.sin(h), denom)
    delta_prime = math.atan2((math.sin(delta) - y * math.sin(xi)) * math.cos(del_alpha), denom)

    return RightAscensionParallax(
        del_alpha_deg=math.degrees(del_alpha),
        delta_prime_deg=math.degrees(delta_prime),
    )


def topocentric_sun(
    nu_deg: float,
    alpha_deg: float,
    delta_deg: float,
    R_au: float,
    longitude: float,
    latitude: float,
    elevation: float,
) -> TopocentricSun:
    """Shift the geocentric α, δ to the observer's position on the surface."""
    H = observer_hour_angle(nu_deg, longitude, alpha_deg)
    xi = sun_equatorial_horizontal_parallax(R_au)
    rap = right_ascension_parallax_and_topocentric_dec(latitude, elevation, xi, H, delta_deg)
    return TopocentricSun(
        H_deg=H,
        xi_deg=xi,
        del_alpha_deg=rap.del_alpha_deg,
        delta_prime_deg=rap.delta_prime_deg,
        alpha_prime_deg=alpha_deg + rap.del_alpha_deg,
        H_prime_deg=H - rap.del_alpha_deg,
    )
