"""
Elemental composition of a material.

This module defines :class:`ElementEntry`, the (Z, A) key of one constituent,
and :class:`CompositionTable`, a mapping from entries to mass fractions used
as input to :func:`~pyradlen.physics.radiation_length.composite_radiation_length`.

Main features
-------------

- Validation of atomic numbers, atomic masses and fractions in (0, 1]
- Parsing of three-column composition files (Z, A, mass fraction in %)
- JSON and dictionary serialization, pandas export
- Construction from the predefined material dictionary

Examples
--------

>>> from pyradlen.io.composition import CompositionTable
>>> table = CompositionTable.from_txt("plastic.dat")
>>> table.entries()
[(ElementEntry(atomic_number=1, atomic_mass=1.008), 0.3), ...]
>>> table.radiation_length()
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

import pandas as pd

from pyradlen.errors import (
    InvalidAtomicNumberError,
    InvalidAtomicMassError,
    MalformedCompositionError,
    EmptyCompositionError,
)
from pyradlen.utils.validation import to_atomic_number, to_atomic_mass, to_mass_fraction

logger = logging.getLogger(__name__)


class ElementEntry(NamedTuple):
    """Immutable (Z, A) identifier of one elemental constituent."""
    atomic_number: int
    atomic_mass: float

    def __str__(self):
        return f"Z={self.atomic_number}, A={self.atomic_mass:g}"


class CompositionTable:
    """
    Mapping from :class:`ElementEntry` to mass fraction.

    Keys are unique; adding an existing (Z, A) pair replaces its fraction.
    Fractions are not required to sum to 1 (see :attr:`total_fraction` and
    :meth:`normalized`).

    :attr REQUIRED_DICT_KEYS: Required keys of a serialized entry.
    """

    REQUIRED_DICT_KEYS = ["atomic_number", "atomic_mass", "mass_fraction"]

    def __init__(self, fractions: Optional[Dict[Tuple[int, float], float]] = None,
                 name: Optional[str] = None):
        """
        Initialize a composition table.

        :param fractions: Optional mapping ``{(Z, A): fraction}``.
        :type fractions: dict[tuple[int, float], float]
        :param name: Optional label of the material (e.g. file name).
        :type name: str

        :raises InvalidAtomicNumberError: If a Z is not an integer >= 1.
        :raises InvalidAtomicMassError: If an A is not a finite number > 0.
        :raises MalformedCompositionError: If a key is not a (Z, A) pair or a fraction is out of (0, 1].
        """
        self._fractions: Dict[ElementEntry, float] = {}
        self.name = name
        if fractions:
            for key, fraction in dict(fractions).items():
                try:
                    atomic_number, atomic_mass = key
                except (TypeError, ValueError):
                    raise MalformedCompositionError(f"Composition keys must be (Z, A) pairs, got {key!r}.")
                self.add(atomic_number, atomic_mass, fraction)

    def add(self, atomic_number, atomic_mass, fraction) -> ElementEntry:
        """
        Add (or replace) one constituent.

        :param atomic_number: Atomic number Z >= 1.
        :param atomic_mass: Atomic mass A in g/mol.
        :param fraction: Mass fraction in (0, 1].
        :returns: The entry key.
        :rtype: ElementEntry
        """
        entry = ElementEntry(to_atomic_number(atomic_number), to_atomic_mass(atomic_mass))
        try:
            value = to_mass_fraction(fraction)
        except ValueError as e:
            raise MalformedCompositionError(f"{entry}: {e}") from e
        if entry in self._fractions:
            logger.warning("Duplicate entry %s: fraction %g replaced by %g.", entry, self._fractions[entry], value)
        self._fractions[entry] = value
        return entry

    def __repr__(self):
        label = f" '{self.name}'" if self.name else ""
        return f"<CompositionTable{label} entries={len(self)}, total_fraction={self.total_fraction:.4g}>"

    def __len__(self):
        return len(self._fractions)

    def __iter__(self):
        return iter(self._fractions)

    def __contains__(self, key) -> bool:
        try:
            return ElementEntry(*key) in self._fractions
        except TypeError:
            return False

    def __getitem__(self, key) -> float:
        try:
            entry = ElementEntry(*key)
        except TypeError:
            raise KeyError(key) from None
        if entry not in self._fractions:
            raise KeyError(f"No entry for {entry}")
        return self._fractions[entry]

    def __eq__(self, other):
        if not isinstance(other, CompositionTable):
            return NotImplemented
        return self._fractions == other._fractions

    def keys(self):
        return self._fractions.keys()

    def values(self):
        return self._fractions.values()

    def items(self):
        return self._fractions.items()

    def entries(self) -> List[Tuple[ElementEntry, float]]:
        """
        Get the (entry, fraction) pairs sorted by (Z, A).

        :returns: Sorted list of pairs.
        :rtype: list[tuple[ElementEntry, float]]
        """
        return sorted(self._fractions.items())

    @property
    def total_fraction(self) -> float:
        """
        Sum of all mass fractions.

        :returns: Total fraction (1 for a complete composition).
        :rtype: float
        """
        return sum(fraction for _, fraction in self.entries())

    def normalized(self) -> "CompositionTable":
        """
        Return a copy whose fractions sum to 1.

        :returns: New normalized table.
        :rtype: CompositionTable
        :raises EmptyCompositionError: If the table has no entries.
        """
        if not self._fractions:
            raise EmptyCompositionError("Cannot normalize an empty composition.")
        total = self.total_fraction
        normalized = CompositionTable(name=self.name)
        for entry, fraction in self.entries():
            normalized.add(entry.atomic_number, entry.atomic_mass, fraction / total)
        return normalized

    def radiation_length(self) -> float:
        """
        Radiation length of this composition in g/cm².

        See :func:`~pyradlen.physics.radiation_length.composite_radiation_length`.
        """
        from pyradlen.physics.radiation_length import composite_radiation_length
        return composite_radiation_length(self)

    def to_dict(self) -> Dict:
        """
        Serialize the table to a dictionary.

        :returns: Dictionary with the name and a list of entries.
        :rtype: dict
        """
        return {
            "name": self.name,
            "composition": [
                {"atomic_number": e.atomic_number, "atomic_mass": e.atomic_mass, "mass_fraction": f}
                for e, f in self.entries()
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "CompositionTable":
        """
        Create a table from a serialized dictionary.

        **Expected dictionary format**::

            {
                "name": "water",                        # optional str
                "composition": [
                    {"atomic_number": 1,                # int, Z
                     "atomic_mass": 1.008,              # float, A (g/mol)
                     "mass_fraction": 0.111894},        # float in (0, 1]
                    ...
                ]
            }

        :param data: Dictionary containing serialized table data.
        :type data: dict
        :returns: A new :class:`CompositionTable`.
        :raises MalformedCompositionError: If required fields are missing.
        """
        if "composition" not in data:
            raise MalformedCompositionError("Missing required field in dictionary: composition")
        table = cls(name=data.get("name"))
        for item in data["composition"]:
            missing = [key for key in cls.REQUIRED_DICT_KEYS if key not in item]
            if missing:
                raise MalformedCompositionError(f"Missing required field(s) in entry: {', '.join(missing)}")
            table.add(item["atomic_number"], item["atomic_mass"], item["mass_fraction"])
        return table

    def to_json(self) -> str:
        """Serialize the table to a JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "CompositionTable":
        """Create a table from a JSON string."""
        return cls.from_dict(json.loads(json_str))

    def save(self, filepath: Union[str, Path]):
        """
        Save the table to a JSON file.

        :param filepath: Output file path.
        """
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> "CompositionTable":
        """
        Load a table from a JSON file written by :meth:`save`.

        :param filepath: Path to JSON file.
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the table as a DataFrame sorted by (Z, A).

        :returns: Columns ``atomic_number``, ``atomic_mass``, ``mass_fraction``.
        :rtype: pd.DataFrame
        """
        return pd.DataFrame(
            [(e.atomic_number, e.atomic_mass, f) for e, f in self.entries()],
            columns=self.REQUIRED_DICT_KEYS,
        )

    @classmethod
    def from_rows(cls, rows, name: Optional[str] = None) -> "CompositionTable":
        """
        Create a table from ``(Z, A, percent)`` rows.

        :param rows: Iterable of (atomic number, atomic mass, mass fraction in %).
        :param name: Optional label.
        :returns: A new :class:`CompositionTable`; percentages are divided by 100.
        """
        table = cls(name=name)
        for atomic_number, atomic_mass, percent in rows:
            table.add(atomic_number, atomic_mass, percent / 100.)
        return table

    @classmethod
    def from_material(cls, name: str) -> "CompositionTable":
        """
        Get the composition of a predefined material.

        :param name: Material name in the bundled dictionary (case-insensitive).
        :returns: The material's :class:`CompositionTable`.
        :raises UnknownMaterialError: If the name is not in the dictionary.
        """
        from pyradlen.io.materials import MaterialDictionary
        return MaterialDictionary().get(name).composition

    @classmethod
    def from_txt(cls, filepath: Union[str, Path]) -> "CompositionTable":
        """
        Create a :class:`CompositionTable` from a three-column text file.

        Each line holds the atomic number, the atomic mass and the mass
        fraction in percent, separated by whitespace. Blank lines and
        comments starting with ``#`` are ignored.

        *Example file*::

            # Z    A        %
            1      1.008    30
            6     12.012    60
            8     16.002    10

        :param filepath: Path to the composition file.
        :type filepath: str or Path
        :returns: :class:`CompositionTable` named after the file.
        :rtype: CompositionTable
        :raises MalformedCompositionError: On the first line that is not three numbers
                                           or holds an invalid Z, A or fraction,
                                           or if the file is not UTF-8 text.
        :raises EmptyCompositionError: If the file contains no entries.
        """
        filepath = Path(filepath)
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except UnicodeDecodeError as e:
            raise MalformedCompositionError(
                f"File is not valid UTF-8 text ({e.reason} at byte {e.start})",
                path=str(filepath)) from e

        table = cls(name=str(filepath))
        for line_number, line in enumerate(lines, start=1):
            content = line.split("#", 1)[0].strip()
            if not content:
                continue
            fields = content.split()
            if len(fields) != 3:
                raise MalformedCompositionError(
                    f"Expected 3 columns (Z, A, mass fraction %), got {len(fields)}: '{content}'",
                    path=str(filepath), line_number=line_number)
            try:
                atomic_number, atomic_mass, percent = (float(x) for x in fields)
            except ValueError:
                raise MalformedCompositionError(
                    f"Non-numeric value in '{content}'",
                    path=str(filepath), line_number=line_number) from None
            try:
                table.add(atomic_number, atomic_mass, percent / 100.)
            except (InvalidAtomicNumberError, InvalidAtomicMassError, MalformedCompositionError) as e:
                raise MalformedCompositionError(
                    str(e), path=str(filepath), line_number=line_number) from e

        if len(table) == 0:
            raise EmptyCompositionError(f"No composition entries found in '{filepath}'.")
        logger.info("Loaded %d composition entries from %s", len(table), filepath)
        return table

    def to_txt(self, filepath: Union[str, Path]):
        """
        Write the table in the three-column format read by :meth:`from_txt`.

        :param filepath: Output file path.
        """
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("# Z\tA\tmass fraction [%]\n")
            for entry, fraction in self.entries():
                f.write(f"{entry.atomic_number}\t{entry.atomic_mass!r}\t{repr(fraction * 100.)}\n")
