"""
Dictionary of predefined materials.

This module defines:

- :class:`Material`: a named composition with its density
- :class:`MaterialDictionary`: the collection of predefined materials bundled
  in ``materials.json``, with lookup by name and tabular display

Examples
--------

>>> from pyradlen.io.materials import MaterialDictionary
>>> materials = MaterialDictionary()
>>> lead = materials["lead"]
>>> round(lead.radiation_length, 2), round(lead.radiation_length_cm, 3)
(6.37, 0.561)
>>> materials.display()
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd
from tabulate import tabulate

from pyradlen.errors import UnknownMaterialError
from pyradlen.io.composition import CompositionTable
from pyradlen.io.data_registry import load_material_dictionary
from pyradlen.physics.radiation_length import composite_radiation_length, radiation_length_in_cm


@dataclass
class Material:
    """
    A predefined material.

    :ivar name: Dictionary key of the material.
    :ivar description: Human readable description.
    :ivar density: Density in g/cm³.
    :ivar composition: Elemental composition by mass fraction.
    """
    name: str
    description: str
    density: float
    composition: CompositionTable

    @property
    def radiation_length(self) -> float:
        """Radiation length in g/cm²."""
        return composite_radiation_length(self.composition)

    @property
    def radiation_length_cm(self) -> float:
        """Radiation length in cm at the material density."""
        return radiation_length_in_cm(self.radiation_length, self.density)


class MaterialDictionary:
    """
    Collection of predefined materials, looked up by case-insensitive name.
    """

    REQUIRED_RECORD_KEYS = ["description", "density", "composition"]

    def __init__(self, records: Optional[Dict[str, Dict]] = None):
        """
        Build the dictionary from material records.

        :param records: Mapping of names to records with ``description``, ``density``
                        and ``composition`` (``[Z, A, percent]`` rows). Defaults to
                        the bundled ``materials.json``.
        :type records: dict[str, dict], optional

        :raises ValueError: If a record is missing fields or has a non-positive density.
        """
        if records is None:
            records = load_material_dictionary()

        self.materials: Dict[str, Material] = {}
        for name, record in records.items():
            missing = [key for key in self.REQUIRED_RECORD_KEYS if key not in record]
            if missing:
                raise ValueError(f"Material '{name}' is missing field(s): {', '.join(missing)}")
            density = float(record["density"])
            if not density > 0:
                raise ValueError(f"Material '{name}' has a non-positive density: {density}")
            composition = CompositionTable.from_rows(record["composition"], name=name)
            self.materials[name.lower()] = Material(
                name=name,
                description=record["description"],
                density=density,
                composition=composition,
            )

    def __repr__(self):
        return f"<MaterialDictionary materials={len(self)}>"

    def __len__(self):
        return len(self.materials)

    def __iter__(self):
        return iter(self.names())

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name.strip().lower() in self.materials

    def __getitem__(self, name: str) -> Material:
        return self.get(name)

    def names(self) -> List[str]:
        """
        Get the sorted list of material names.

        :returns: Material names.
        :rtype: list[str]
        """
        return sorted(m.name for m in self.materials.values())

    def get(self, name: str) -> Material:
        """
        Retrieve a material by name (case-insensitive).

        :param name: Material name, e.g. "water" or "PbWO4".
        :returns: The :class:`Material`.
        :raises UnknownMaterialError: If the name is not in the dictionary.
        """
        key = name.strip().lower() if isinstance(name, str) else name
        if key not in self.materials:
            raise UnknownMaterialError(name, self.names())
        return self.materials[key]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabulate every material with its computed radiation length.

        :returns: Columns ``name``, ``description``, ``density``,
                  ``radiation_length`` [g/cm²] and ``radiation_length_cm`` [cm].
        :rtype: pd.DataFrame
        """
        rows = []
        for name in self.names():
            material = self.get(name)
            rows.append({
                "name": material.name,
                "description": material.description,
                "density": material.density,
                "radiation_length": material.radiation_length,
                "radiation_length_cm": material.radiation_length_cm,
            })
        return pd.DataFrame(rows, columns=["name", "description", "density",
                                           "radiation_length", "radiation_length_cm"])

    def display(self):
        """
        Print the material dictionary as a table.
        """
        df = self.to_dataframe()
        print("\n\t*** Printing Material Dictionary *** \t")
        print(tabulate(
            df,
            headers=["Material", "Description", "Density [g/cm3]", "X0 [g/cm2]", "X0 [cm]"],
            tablefmt="fancy_grid",
            showindex=False,
            floatfmt=("", "", ".5g", ".4g", ".4g"),
        ))
