"""
Radiation length of mono-elemental and composite materials.

This module combines the Tsai building blocks of :mod:`pyradlen.physics.tsai`
into radiation lengths in g/cm²:

- :func:`mono_nucleus_radiation_length`: X₀ of a pure element (Z, A)
- :func:`composite_radiation_length`: X₀ of a mixture, from the inverse
  mass-fraction rule 1/X₀ = Σ wᵢ/X₀ᵢ
- :func:`contributions`: per-element breakdown of the mixing rule
- :func:`radiation_length_in_cm`: conversion to a length for a given density

Examples
--------

>>> from pyradlen.physics.radiation_length import mono_nucleus_radiation_length
>>> round(mono_nucleus_radiation_length(82, 207.2), 2)
6.37
>>> from pyradlen.physics.radiation_length import composite_radiation_length
>>> composite_radiation_length({(1, 1.008): 0.111894, (8, 15.999): 0.888106})
36.0...
"""

import logging
import warnings
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from pyradlen.errors import EmptyCompositionError
from pyradlen.physics.tsai import (
    RADIATION_LENGTH_CONSTANT,
    radiation_logarithm,
    radiation_logarithm_prime,
    coulomb_correction,
)
from pyradlen.utils.validation import check_atomic_number, check_atomic_mass, as_output

logger = logging.getLogger(__name__)

# Allowed deviation of the summed mass fractions from 1 before warning
FRACTION_SUM_TOLERANCE = 1e-3


def mono_nucleus_radiation_length(atomic_number, atomic_mass):
    """
    Compute the radiation length of a single-element material.

    1/X₀ = k · (Z² · (L_rad − F(Z)) + Z · L'_rad) / A

    :param atomic_number: Atomic number(s) Z >= 1.
    :type atomic_number: int or array-like
    :param atomic_mass: Atomic mass(es) A in g/mol.
    :type atomic_mass: float or array-like
    :returns: Radiation length in g/cm².
    :rtype: float or np.ndarray
    :raises InvalidAtomicNumberError: If any Z is not an integer >= 1.
    :raises InvalidAtomicMassError: If any A is not a finite number > 0.
    """
    z = check_atomic_number(atomic_number)
    a = check_atomic_mass(atomic_mass)
    inverted_rad_length = RADIATION_LENGTH_CONSTANT * (
        z * z * (radiation_logarithm(z) - coulomb_correction(z))
        + z * radiation_logarithm_prime(z)
    )
    return as_output(a / inverted_rad_length, atomic_number, atomic_mass)


def _as_composition(table):
    # Deferred: pyradlen.io imports this module
    from pyradlen.io.composition import CompositionTable

    if isinstance(table, CompositionTable):
        return table
    return CompositionTable(table)


def _check_fraction_sum(table) -> None:
    total = table.total_fraction
    if abs(total - 1.0) > FRACTION_SUM_TOLERANCE:
        warnings.warn(
            f"Mass fractions sum to {total:.6g}, not 1. "
            "The composition is used as is; call normalized() to rescale it.",
            UserWarning,
            stacklevel=3,
        )


def composite_radiation_length(table) -> float:
    """
    Compute the radiation length of a composite material.

    Each entry contributes wᵢ / X₀(Zᵢ, Aᵢ) to the inverse radiation length.
    Entries are summed in ascending (Z, A) order, so the result does not
    depend on insertion order.

    Fractions are used as given. A :class:`UserWarning` is issued if they do
    not sum to 1 within :data:`FRACTION_SUM_TOLERANCE`.

    :param table: Composition as a :class:`~pyradlen.io.composition.CompositionTable`
                  or a mapping ``{(Z, A): fraction}``.
    :returns: Radiation length in g/cm².
    :rtype: float
    :raises EmptyCompositionError: If the composition has no entries.
    """
    table = _as_composition(table)
    if len(table) == 0:
        raise EmptyCompositionError()
    _check_fraction_sum(table)

    inverted_rad_length = 0.
    for entry, fraction in table.entries():
        element_rad_length = mono_nucleus_radiation_length(entry.atomic_number, entry.atomic_mass)
        logger.debug("Z=%d A=%g w=%g: X0=%.6g g/cm2", entry.atomic_number, entry.atomic_mass,
                     fraction, element_rad_length)
        inverted_rad_length += fraction / element_rad_length

    return 1. / inverted_rad_length


def contributions(table) -> pd.DataFrame:
    """
    Break the mixing rule down per element.

    Columns:

    - ``atomic_number``, ``atomic_mass``, ``mass_fraction``
    - ``radiation_length``: X₀ of the pure element [g/cm²]
    - ``inverse_contribution``: wᵢ / X₀ᵢ [cm²/g]
    - ``share``: fraction of the total inverse radiation length

    :param table: Composition table or mapping ``{(Z, A): fraction}``.
    :returns: One row per element, sorted by (Z, A).
    :rtype: pd.DataFrame
    :raises EmptyCompositionError: If the composition has no entries.
    """
    table = _as_composition(table)
    if len(table) == 0:
        raise EmptyCompositionError()

    rows = table.entries()
    z = np.array([entry.atomic_number for entry, _ in rows])
    a = np.array([entry.atomic_mass for entry, _ in rows])
    w = np.array([fraction for _, fraction in rows])
    x0 = np.atleast_1d(mono_nucleus_radiation_length(z, a))
    inverse = w / x0

    return pd.DataFrame({
        "atomic_number": z,
        "atomic_mass": a,
        "mass_fraction": w,
        "radiation_length": x0,
        "inverse_contribution": inverse,
        "share": inverse / inverse.sum(),
    })


def radiation_length_in_cm(radiation_length: float, density: float) -> float:
    """
    Convert a radiation length from g/cm² to cm.

    :param radiation_length: Radiation length in g/cm².
    :param density: Material density in g/cm³.
    :returns: Radiation length in cm.
    :raises ValueError: If density is not positive.
    """
    if density is None or not density > 0:
        raise ValueError(f"Density must be positive, got {density}.")
    return radiation_length / density


def plot_contributions(
    table,
    label: Optional[str] = None,
    show: bool = True,
    ax: Optional[plt.Axes] = None
):
    """
    Bar chart of each element's share of the inverse radiation length.

    :param table: Composition table or mapping ``{(Z, A): fraction}``.
    :param label: Optional title.
    :param show: Whether to call plt.show().
    :param ax: Matplotlib Axes object to draw on. If None, a new figure is created.
    """
    df = contributions(table)

    created_fig = False
    if ax is None:
        _, ax = plt.subplots()
        created_fig = True

    names = [f"Z={z} (A={a:g})" for z, a in zip(df["atomic_number"], df["atomic_mass"])]
    ax.bar(names, df["share"], alpha=0.7, label="1/X₀ share")
    ax.plot(names, df["mass_fraction"], "o", color="black", label="Mass fraction")
    ax.set_ylabel("Fraction")
    ax.set_title(label or "Contributions to 1/X₀")
    ax.grid(True, axis="y")
    ax.legend()

    if show and created_fig:
        plt.tight_layout()
        plt.show()
    return ax
