"""
Input validation for atomic numbers, atomic masses and mass fractions.

The physics functions accept scalars or array-likes. The helpers here turn the
input into a float ``np.ndarray`` after checking it, and raise the typed
errors of :mod:`pyradlen.errors` on the first invalid value.

- :func:`check_atomic_number` / :func:`to_atomic_number`
- :func:`check_atomic_mass` / :func:`to_atomic_mass`
- :func:`to_mass_fraction`
- :func:`as_output`: give back a Python float for scalar input
"""

import numbers
import numpy as np

from pyradlen.errors import InvalidAtomicNumberError, InvalidAtomicMassError

# Largest accepted atomic number
MAX_ATOMIC_NUMBER = 120


def _first_invalid(values: np.ndarray, invalid: np.ndarray):
    return values[invalid].ravel()[0].item()


def check_atomic_number(atomic_number) -> np.ndarray:
    """
    Validate one or more atomic numbers.

    Booleans, non-numeric values, non-finite values, non-integral values and
    values outside [1, :data:`MAX_ATOMIC_NUMBER`] are rejected.

    :param atomic_number: Scalar or array-like of atomic numbers.
    :returns: Atomic numbers as a float array (0-d for scalar input).
    :rtype: np.ndarray
    :raises InvalidAtomicNumberError: If any value is not an integer in [1, MAX_ATOMIC_NUMBER].
    """
    if isinstance(atomic_number, (bool, np.bool_)):
        raise InvalidAtomicNumberError(atomic_number)
    z = np.asarray(atomic_number)
    if z.dtype == bool or not np.issubdtype(z.dtype, np.number) or np.issubdtype(z.dtype, np.complexfloating):
        raise InvalidAtomicNumberError(atomic_number)
    z = z.astype(float)
    with np.errstate(invalid="ignore"):
        invalid = ~np.isfinite(z) | (z != np.floor(z)) | (z < 1) | (z > MAX_ATOMIC_NUMBER)
    if np.any(invalid):
        raise InvalidAtomicNumberError(_first_invalid(np.asarray(atomic_number), invalid))
    return z


def to_atomic_number(value) -> int:
    """
    Validate a single atomic number and return it as ``int``.

    Integral floats such as ``6.0`` (as read from text files) are accepted.

    :raises InvalidAtomicNumberError: If the value is not an integer in [1, MAX_ATOMIC_NUMBER].
    """
    if np.ndim(value) != 0:
        raise InvalidAtomicNumberError(value)
    return int(check_atomic_number(value))


def check_atomic_mass(atomic_mass) -> np.ndarray:
    """
    Validate one or more atomic masses (g/mol).

    :param atomic_mass: Scalar or array-like of atomic masses.
    :returns: Atomic masses as a float array (0-d for scalar input).
    :rtype: np.ndarray
    :raises InvalidAtomicMassError: If any value is not a finite number > 0.
    """
    if isinstance(atomic_mass, (bool, np.bool_)):
        raise InvalidAtomicMassError(atomic_mass)
    a = np.asarray(atomic_mass)
    if a.dtype == bool or not np.issubdtype(a.dtype, np.number) or np.issubdtype(a.dtype, np.complexfloating):
        raise InvalidAtomicMassError(atomic_mass)
    a = a.astype(float)
    with np.errstate(invalid="ignore"):
        invalid = ~np.isfinite(a) | ~(a > 0)
    if np.any(invalid):
        raise InvalidAtomicMassError(_first_invalid(np.asarray(atomic_mass), invalid))
    return a


def to_atomic_mass(value) -> float:
    """Validate a single atomic mass and return it as ``float``."""
    if np.ndim(value) != 0:
        raise InvalidAtomicMassError(value)
    return float(check_atomic_mass(value))


def to_mass_fraction(value) -> float:
    """
    Validate a single mass fraction.

    :returns: The fraction as ``float``.
    :raises ValueError: If the value is not a real number in (0, 1].
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.floating, np.integer)):
        raise ValueError(f"Mass fraction must be a real number, got {value!r}.")
    fraction = float(value)
    if not (0.0 < fraction <= 1.0):
        raise ValueError(f"Mass fraction must be in (0, 1], got {fraction}.")
    return fraction


def as_output(result: np.ndarray, *inputs):
    """
    Return ``result`` as a Python float when every input was a scalar.

    :param result: Computed array.
    :param inputs: Original (unvalidated) inputs.
    :returns: ``float`` for scalar inputs, otherwise ``np.ndarray``.
    """
    if all(np.ndim(x) == 0 for x in inputs):
        return float(result)
    return np.asarray(result, dtype=float)
