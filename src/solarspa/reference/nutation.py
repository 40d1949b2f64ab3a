from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import third_order_polynomial
from .terms import NUTATION_TERMS


# ------------------------------------------------------------
# Lunar/solar mean-motion arguments (degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class NutationArgs:
    """The five fundamental arguments X0..X4 of the IAU 1980 series (degrees, unwrapped)."""
    D_deg: float      # mean elongation of the moon from the sun
    M_deg: float      # mean anomaly of the sun
    Mp_deg: float     # mean anomaly of the moon
    F_deg: float      # moon's argument of latitude
    Omega_deg: float  # longitude of the ascending node of the moon


def mean_elongation_moon_sun(jce: float) -> float:
    return third_order_polynomial(1.0 / 189474.0, -0.0019142, 445267.11148, 297.85036, jce)


def mean_anomaly_sun(jce: float) -> float:
    return third_order_polynomial(-1.0 / 300000.0, -0.0001603, 35999.05034, 357.52772, jce)


def mean_anomaly_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298, jce)


def argument_latitude_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191, jce)


def ascending_longitude_moon(jce: float) -> float:
    return third_order_polynomial(1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452, jce)


def nutation_args(jce: float) -> NutationArgs:
    return NutationArgs(
        D_deg=mean_elongation_moon_sun(jce),
        M_deg=mean_anomaly_sun(jce),
        Mp_deg=mean_anomaly_moon(jce),
        F_deg=argument_latitude_moon(jce),
        Omega_deg=ascending_longitude_moon(jce),
    )


# ------------------------------------------------------------
# Nutation in longitude / obliquity
# ------------------------------------------------------------

@dataclass(frozen=True)
class Nutation:
    del_psi_deg: float  # nutation in longitude
    del_eps_deg: float  # nutation in obliquity


def nutation_longitude_obliquity(jce: float, x: NutationArgs) -> Nutation:
    """
    Δψ = Σ (a + b·jce) sin(Σ X_j Y_ij)
    Δε = Σ (c + d·jce) cos(Σ X_j Y_ij)

    Coefficients are in 0.0001", so dividing by 36,000,000 yields degrees.
    """
    sum_psi = 0.0
    sum_eps = 0.0
    for t in NUTATION_TERMS:
        arg = math.radians(
            x.D_deg * t.d
            + x.M_deg * t.m
            + x.Mp_deg * t.mp
            + x.F_deg * t.f
            + x.Omega_deg * t.om
        )
        sum_psi += (t.psi + jce * t.psi_t) * math.sin(arg)
        sum_eps += (t.eps + jce * t.eps_t) * math.cos(arg)

    return Nutation(del_psi_deg=sum_psi / 36000000.0, del_eps_deg=sum_eps / 36000000.0)


# ------------------------------------------------------------
# Obliquity of the ecliptic
# ------------------------------------------------------------

def ecliptic_mean_obliquity(jme: float) -> float:
    """
    Mean obliquity ε0 in ARCSECONDS (Laskar 1986), U = jme/10:

      ε0 = 84381.448 - 4680.93 U - 1.55 U^2 + 1999.25 U^3 - 51.38 U^4
           - 249.67 U^5 - 39.05 U^6 + 7.12 U^7 + 27.87 U^8 + 5.79 U^9 + 2.45 U^10
    """
    u = jme / 10.0
    return 84381.448 + u * (-4680.93 + u * (-1.55 + u * (1999.25 + u * (-51.38 + u * (
        -249.67 + u * (-39.05 + u * (7.12 + u * (27.87 + u * (5.79 + u * 2.45)))))))))


def ecliptic_true_obliquity(del_eps_deg: float, eps0_arcsec: float) -> float:
    """ε = Δε + ε0/3600 (degrees)"""
    return del_eps_deg + eps0_arcsec / 3600.0
