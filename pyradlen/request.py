"""
Request and result containers for a radiation length computation.

This module defines:

- :class:`RadiationLengthRequest`: the material selection (atomic id, element,
  predefined material or composition file) and an optional density
- :class:`RadiationLengthResult`: the computed radiation length with its
  conversion to cm and a printable summary

A request is built once by the caller (e.g. the command line) and resolved by
:meth:`RadiationLengthRequest.compute`. When several selections are given the
priority is: composition file, atomic id / element, predefined material.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from pyradlen.io.composition import CompositionTable
from pyradlen.io.elements import resolve_element
from pyradlen.io.materials import MaterialDictionary
from pyradlen.physics.radiation_length import (
    mono_nucleus_radiation_length,
    composite_radiation_length,
    radiation_length_in_cm,
)
from pyradlen.utils.validation import to_atomic_number, to_atomic_mass

logger = logging.getLogger(__name__)


@dataclass
class RadiationLengthResult:
    """
    Outcome of a radiation length computation.

    :ivar label: Description of the material used in the summary.
    :ivar radiation_length: Radiation length in g/cm².
    :ivar density: Density in g/cm³, if known.
    :ivar mode: Request mode that produced the result.
    :ivar composition: Composition used, for composite materials.
    """
    label: str
    radiation_length: float
    density: Optional[float] = None
    mode: str = "mono"
    composition: Optional[CompositionTable] = None

    @property
    def length_cm(self) -> Optional[float]:
        """Radiation length in cm, or None without a density."""
        if self.density is None:
            return None
        return radiation_length_in_cm(self.radiation_length, self.density)

    def summary(self) -> str:
        """
        One-line description of the result.

        :returns: e.g. ``Radiation length of material with Z = 82, A = 207.2 is 6.37 g/cm2.``
        :rtype: str
        """
        text = f"Radiation length of {self.label} is {self.radiation_length:.6g} g/cm2."
        if self.density is not None:
            text += (f" Value corrected for a density of {self.density:g} g/cm3 "
                     f"is {self.length_cm:.6g} cm.")
        return text


@dataclass
class RadiationLengthRequest:
    """
    Material selection for a radiation length computation.

    :ivar atomic_number: Atomic number Z of a mono-nucleus material.
    :ivar atomic_mass: Atomic mass A (g/mol) of a mono-nucleus material.
    :ivar element: Element name, symbol or atomic number; A defaults to the standard atomic mass.
    :ivar material: Name of a predefined material.
    :ivar composition_file: Path to a three-column composition file.
    :ivar density: Density in g/cm³ used for the conversion to cm.
    :ivar print_dictionary: Request a listing of the predefined materials.
    :ivar normalize: Rescale composition fractions to sum to 1.
    """

    @classmethod
    def from_dict(cls, config: dict) -> "RadiationLengthRequest":
        """
        Create a RadiationLengthRequest instance from a dictionary.

        :param config: Dictionary of configuration fields.
        :type config: dict

        :returns: Populated RadiationLengthRequest instance.
        :rtype: RadiationLengthRequest

        :raises ValueError: If unknown keys are present in the dictionary.
        """
        valid_keys = set(cls.__dataclass_fields__.keys())
        extra_keys = set(config.keys()) - valid_keys

        if extra_keys:
            raise ValueError(
                f"Unrecognized keys in RadiationLengthRequest config: {sorted(extra_keys)}"
            )

        return cls(**config)

    atomic_number: Optional[int] = None
    atomic_mass: Optional[float] = None
    element: Optional[str] = None
    material: Optional[str] = None
    composition_file: Optional[str] = None
    density: Optional[float] = None
    print_dictionary: bool = False
    normalize: bool = False

    def __post_init__(self):
        if (self.atomic_number is None) != (self.atomic_mass is None):
            raise ValueError("atomic_number and atomic_mass must be given together.")
        if self.density is not None and not self.density > 0:
            raise ValueError(f"Density must be positive, got {self.density}.")

    @property
    def mode(self) -> str:
        """
        Selected computation mode.

        :returns: One of 'composition', 'mono', 'predefined' or 'dictionary'.
        :rtype: str
        :raises ValueError: If no material is selected.
        """
        if self.composition_file is not None:
            return "composition"
        if self.atomic_number is not None or self.element is not None:
            return "mono"
        if self.material is not None:
            return "predefined"
        if self.print_dictionary:
            return "dictionary"
        raise ValueError(
            "No material specified. Use a composition file, an atomic id, an element "
            "or a predefined material, or ask for the material dictionary."
        )

    def _atomic_id(self) -> Tuple[int, float]:
        if self.atomic_number is not None:
            return to_atomic_number(self.atomic_number), to_atomic_mass(self.atomic_mass)
        entry = resolve_element(self.element)
        return entry.atomic_number, entry.atomic_mass

    def composition(self) -> CompositionTable:
        """
        Resolve the request to a composition table.

        Mono-nucleus requests give a single-entry table with fraction 1.

        :returns: Composition of the selected material.
        :rtype: CompositionTable
        :raises ValueError: In 'dictionary' mode or without a selection.
        """
        mode = self.mode
        if mode == "composition":
            table = CompositionTable.from_txt(self.composition_file)
        elif mode == "mono":
            z, a = self._atomic_id()
            table = CompositionTable({(z, a): 1.0}, name=f"Z={z}, A={a:g}")
        elif mode == "predefined":
            table = MaterialDictionary().get(self.material).composition
        else:
            raise ValueError("A dictionary listing has no composition.")
        return table.normalized() if self.normalize else table

    def compute(self) -> RadiationLengthResult:
        """
        Compute the radiation length of the selected material.

        For a predefined material without an explicit density, the
        dictionary density is used.

        :returns: The computed result.
        :rtype: RadiationLengthResult
        :raises ValueError: In 'dictionary' mode or without a selection.
        """
        mode = self.mode
        if mode == "mono":
            z, a = self._atomic_id()
            x0 = mono_nucleus_radiation_length(z, a)
            logger.info("Mono-nucleus material Z=%d, A=%g: X0=%.6g g/cm2", z, a, x0)
            return RadiationLengthResult(
                label=f"material with Z = {z}, A = {a:g}",
                radiation_length=x0,
                density=self.density,
                mode=mode,
            )

        if mode == "composition":
            table = self.composition()
            return RadiationLengthResult(
                label=f'"{self.composition_file}"',
                radiation_length=composite_radiation_length(table),
                density=self.density,
                mode=mode,
                composition=table,
            )

        if mode == "predefined":
            material = MaterialDictionary().get(self.material)
            table = material.composition.normalized() if self.normalize else material.composition
            return RadiationLengthResult(
                label=f'"{material.name}" ({material.description})',
                radiation_length=composite_radiation_length(table),
                density=self.density if self.density is not None else material.density,
                mode=mode,
                composition=table,
            )

        raise ValueError("A dictionary listing has no radiation length.")
