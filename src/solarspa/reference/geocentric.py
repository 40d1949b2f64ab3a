# reference/geocentric.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import angles
from . import heliocentric as hc
from . import nutation as nut
from . import time_scales as ts


@dataclass(frozen=True)
class GeocentricSun:
    """Everything the geocentric reduction produces for one JD (degrees unless noted)."""
    time: ts.TimeScales
    helio: hc.HeliocentricPosition
    ecliptic: hc.GeocentricEcliptic
    args: nut.NutationArgs
    nutation: nut.Nutation
    eps0_arcsec: float
    eps_deg: float
    del_tau_deg: float
    lambda_deg: float
    nu0_deg: float
    nu_deg: float
    alpha_deg: float
    delta_deg: float


def aberration_correction(R_au: float) -> float:
    """Δτ = -20.4898" / (3600 R)"""
    return -20.4898 / (3600.0 * R_au)


def apparent_sun_longitude(theta_deg: float, del_psi_deg: float, del_tau_deg: float) -> float:
    return theta_deg + del_psi_deg + del_tau_deg


def greenwich_mean_sidereal_time(jd: float, jc: float) -> float:
    """ν0 (degrees, [0,360))"""
    return angles.wrap_deg(
        280.46061837
        + 360.98564736629 * (jd - ts.J2000)
        + jc * jc * (0.000387933 - jc / 38710000.0)
    )


def greenwich_sidereal_time(nu0_deg: float, del_psi_deg: float, eps_deg: float) -> float:
    """Apparent sidereal time ν = ν0 + Δψ cos ε"""
    return nu0_deg + del_psi_deg * math.cos(math.radians(eps_deg))


def geocentric_right_ascension(lambda_deg: float, eps_deg: float, beta_deg: float) -> float:
    lam = math.radians(lambda_deg)
    eps = math.radians(eps_deg)
    return angles.wrap_deg(math.degrees(math.atan2(
        math.sin(lam) * math.cos(eps) - math.tan(math.radians(beta_deg)) * math.sin(eps),
        math.cos(lam),
    )))


def geocentric_declination(beta_deg: float, eps_deg: float, lambda_deg: float) -> float:
    beta = math.radians(beta_deg)
    eps = math.radians(eps_deg)
    return math.degrees(math.asin(angles.clamp_unit(
        math.sin(beta) * math.cos(eps)
        + math.cos(beta) * math.sin(eps) * math.sin(math.radians(lambda_deg))
    )))


def geocentric_sun(jd: float, delta_t: float) -> GeocentricSun:
    """
    Run the reduction from JD(UT1) to apparent geocentric α, δ and sidereal time.

    ``delta_t`` is TT-UT1 in seconds; it only enters through JDE.
    """
    t = ts.time_scales(jd, delta_t)

    helio = hc.heliocentric_position(t.jme)
    ecl = hc.to_geocentric(helio)

    x = nut.nutation_args(t.jce)
    dn = nut.nutation_longitude_obliquity(t.jce, x)

    eps0 = nut.ecliptic_mean_obliquity(t.jme)
    eps = nut.ecliptic_true_obliquity(dn.del_eps_deg, eps0)

    del_tau = aberration_correction(helio.R_au)
    lam = apparent_sun_longitude(ecl.theta_deg, dn.del_psi_deg, del_tau)
    nu0 = greenwich_mean_sidereal_time(jd, t.jc)
    nu = greenwich_sidereal_time(nu0, dn.del_psi_deg, eps)

    return GeocentricSun(
        time=t,
        helio=helio,
        ecliptic=ecl,
        args=x,
        nutation=dn,
        eps0_arcsec=eps0,
        eps_deg=eps,
        del_tau_deg=del_tau,
        lambda_deg=lam,
        nu0_deg=nu0,
        nu_deg=nu,
        alpha_deg=geocentric_right_ascension(lam, eps, ecl.beta_deg),
        delta_deg=geocentric_declination(ecl.beta_deg, eps, lam),
    )
