"""
pyRadLen: radiation length calculator for materials.

pyRadLen computes the radiation length X₀ of mono-elemental and composite
materials with the Tsai parameterization (Rev. Mod. Phys. 46, 815, 1974).
It supports:

- Radiation logarithms and Coulomb correction for any Z >= 1
- Radiation length of a pure element from its atomic number and mass
- Composite materials by inverse mass-fraction mixing
- Three-column composition files (Z, A, mass fraction %)
- A dictionary of predefined detector and shielding materials
- Conversion to a length in cm for a given density

Main subpackages
----------------

- :mod:`pyradlen.physics`: Tsai building blocks and radiation length computation.
- :mod:`pyradlen.io`: Composition tables, element lookup and material dictionary.
- :mod:`pyradlen.utils`: Input validation helpers.

Command line: ``pyradlen --help`` or ``python -m pyradlen --help``.
"""

from .errors import (
    RadiationLengthError,
    InvalidAtomicNumberError,
    InvalidAtomicMassError,
    EmptyCompositionError,
    MalformedCompositionError,
    UnknownMaterialError,
)
from .physics import (
    radiation_logarithm,
    radiation_logarithm_prime,
    coulomb_correction,
    mono_nucleus_radiation_length,
    composite_radiation_length,
)
from .io import CompositionTable, ElementEntry, Material, MaterialDictionary
from .request import RadiationLengthRequest, RadiationLengthResult

__version__ = "1.0.0"

__all__ = [
    "RadiationLengthError",
    "InvalidAtomicNumberError",
    "InvalidAtomicMassError",
    "EmptyCompositionError",
    "MalformedCompositionError",
    "UnknownMaterialError",
    "radiation_logarithm",
    "radiation_logarithm_prime",
    "coulomb_correction",
    "mono_nucleus_radiation_length",
    "composite_radiation_length",
    "CompositionTable",
    "ElementEntry",
    "Material",
    "MaterialDictionary",
    "RadiationLengthRequest",
    "RadiationLengthResult",
]
