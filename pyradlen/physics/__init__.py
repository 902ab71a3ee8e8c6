"""
Physics core of pyRadLen.

This subpackage implements the Tsai parameterization of the radiation length.

Modules
-------

- :mod:`tsai`:
  The atomic-number dependent building blocks: radiation logarithms
  L_rad and L'_rad and the Coulomb correction F(Z).

- :mod:`radiation_length`:
  Radiation length of single elements and of composite materials
  (inverse mass-fraction mixing), with a per-element breakdown.
"""

from .tsai import radiation_logarithm, radiation_logarithm_prime, coulomb_correction
from .radiation_length import (
    mono_nucleus_radiation_length,
    composite_radiation_length,
    contributions,
    radiation_length_in_cm,
)

__all__ = [
    "radiation_logarithm",
    "radiation_logarithm_prime",
    "coulomb_correction",
    "mono_nucleus_radiation_length",
    "composite_radiation_length",
    "contributions",
    "radiation_length_in_cm",
]
