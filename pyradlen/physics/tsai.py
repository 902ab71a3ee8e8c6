"""
Building blocks of the Tsai parameterization of the radiation length.

This module implements the three atomic-number dependent quantities entering
Tsai's closed-form expression for the inverse radiation length
(Y.-S. Tsai, Rev. Mod. Phys. 46, 815, 1974):

- :func:`radiation_logarithm`: the radiation logarithm L_rad(Z)
- :func:`radiation_logarithm_prime`: the inelastic radiation logarithm L'_rad(Z)
- :func:`coulomb_correction`: the Coulomb correction F(Z)

For hydrogen through beryllium the Thomas-Fermi screening behind the generic
logarithms is inaccurate and tabulated values are used instead.

All functions accept a scalar or an array-like of atomic numbers. Scalars give
a ``float``, arrays give an ``np.ndarray``.

Examples
--------

>>> from pyradlen.physics.tsai import radiation_logarithm, coulomb_correction
>>> radiation_logarithm(1)
5.31
>>> radiation_logarithm([6, 82])
array([4.61..., 3.73...])
>>> coulomb_correction(82)
0.33...
"""

import numpy as np

from pyradlen.utils.validation import check_atomic_number, as_output

FINE_STRUCTURE_CONSTANT = 0.00729735256
RADIATION_LENGTH_CONSTANT = 0.001395852  # 4·α·r_e²·N_A in cm²/g

# Tabulated values for Z = 1..4, index 0 unused
LIGHT_ELEMENT_L_RAD = np.array([np.nan, 5.31, 4.79, 4.74, 4.71])
LIGHT_ELEMENT_L_RAD_PRIME = np.array([np.nan, 6.144, 5.621, 5.805, 5.924])


def _tabulated_or_generic(z: np.ndarray, table: np.ndarray, generic: np.ndarray) -> np.ndarray:
    index = np.clip(z, 0, len(table) - 1).astype(int)
    return np.where(z < len(table), table[index], generic)


def radiation_logarithm(atomic_number):
    """
    Compute the radiation logarithm L_rad(Z).

    L_rad = ln(184.15 · Z^(-1/3)) for Z >= 5; tabulated for Z = 1..4.

    :param atomic_number: Atomic number(s) Z >= 1.
    :type atomic_number: int or array-like
    :returns: L_rad(Z).
    :rtype: float or np.ndarray
    :raises InvalidAtomicNumberError: If any Z is not an integer >= 1.
    """
    z = check_atomic_number(atomic_number)
    generic = np.log(184.15 * np.power(z, -1. / 3.))
    return as_output(_tabulated_or_generic(z, LIGHT_ELEMENT_L_RAD, generic), atomic_number)


def radiation_logarithm_prime(atomic_number):
    """
    Compute the inelastic radiation logarithm L'_rad(Z).

    L'_rad = ln(1194 · Z^(-2/3)) for Z >= 5; tabulated for Z = 1..4.

    :param atomic_number: Atomic number(s) Z >= 1.
    :type atomic_number: int or array-like
    :returns: L'_rad(Z).
    :rtype: float or np.ndarray
    :raises InvalidAtomicNumberError: If any Z is not an integer >= 1.
    """
    z = check_atomic_number(atomic_number)
    generic = np.log(1194. * np.power(z, -2. / 3.))
    return as_output(_tabulated_or_generic(z, LIGHT_ELEMENT_L_RAD_PRIME, generic), atomic_number)


def coulomb_correction(atomic_number):
    """
    Compute the Coulomb correction F(Z).

    With a = α·Z:

    F(Z) = a² · [1/(1 + a²) + 0.20206 − 0.0369·a² + 0.0083·a⁴ − 0.002·a⁶]

    :param atomic_number: Atomic number(s) Z >= 1.
    :type atomic_number: int or array-like
    :returns: F(Z).
    :rtype: float or np.ndarray
    :raises InvalidAtomicNumberError: If any Z is not an integer >= 1.
    """
    z = check_atomic_number(atomic_number)
    a = FINE_STRUCTURE_CONSTANT * z
    a_sq = a * a
    f_z = a_sq * (1. / (1 + a_sq) + 0.20206 - 0.0369 * a_sq
                  + 0.0083 * np.power(a, 4) - 0.002 * np.power(a, 6))
    return as_output(f_z, atomic_number)
