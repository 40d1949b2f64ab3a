from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from . import angles


@dataclass(frozen=True)
class SurfaceAngles:
    zenith_deg: float
    azimuth_astro_deg: float  # westward from south
    azimuth_deg: float        # eastward from north (navigators, solar energy)
    incidence_deg: Optional[float] = None


def topocentric_zenith_angle(e_deg: float) -> float:
    return 90.0 - e_deg


def topocentric_azimuth_angle_astro(H_prime_deg: float, latitude: float, delta_prime_deg: float) -> float:
    h = math.radians(H_prime_deg)
    lat = math.radians(latitude)
    return angles.wrap_deg(math.degrees(math.atan2(
        math.sin(h),
        math.cos(h) * math.sin(lat) - math.tan(math.radians(delta_prime_deg)) * math.cos(lat),
    )))


def topocentric_azimuth_angle(azimuth_astro_deg: float) -> float:
    return angles.wrap_deg(azimuth_astro_deg + 180.0)


def surface_incidence_angle(
    zenith_deg: float,
    azimuth_astro_deg: float,
    azm_rotation: float,
    slope: float,
) -> float:
    """
    Angle between the sun direction and the normal of a surface tilted ``slope``
    degrees from horizontal and rotated ``azm_rotation`` degrees from south
    (negative east).
    """
    z = math.radians(zenith_deg)
    s = math.radians(slope)
    return math.degrees(math.acos(angles.clamp_unit(
        math.cos(z) * math.cos(s)
        + math.sin(s) * math.sin(z) * math.cos(math.radians(azimuth_astro_deg - azm_rotation))
    )))


def surface_angles(
    e_deg: float,
    H_prime_deg: float,
    delta_prime_deg: float,
    latitude: float,
    *,
    slope: float = 0.0,
    azm_rotation: float = 0.0,
    incidence: bool = True,
) -> SurfaceAngles:
    zenith = topocentric_zenith_angle(e_deg)
    az_astro = topocentric_azimuth_angle_astro(H_prime_deg, latitude, delta_prime_deg)
    return SurfaceAngles(
        zenith_deg=zenith,
        azimuth_astro_deg=az_astro,
        azimuth_deg=topocentric_azimuth_angle(az_astro),
        incidence_deg=surface_incidence_angle(zenith, az_astro, azm_rotation, slope) if incidence else None,
    )
