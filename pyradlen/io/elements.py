"""
Resolution of element identifiers.

Elements can be given by full name ("Lead"), symbol ("Pb") or atomic number
(82 or "82"). Lookups use the bundled ``elements.json`` table loaded by
:func:`~pyradlen.io.data_registry.load_lookup_table`.

Examples
--------

>>> from pyradlen.io.elements import resolve_element, element_symbol
>>> resolve_element("Pb")
ElementEntry(atomic_number=82, atomic_mass=207.2)
>>> element_symbol(6)
'C'
"""

from typing import Dict, Union

from pyradlen.io.composition import ElementEntry
from pyradlen.io.data_registry import load_lookup_table


def _find_record(identifier: Union[str, int]) -> Dict:
    lookup = load_lookup_table()

    # Full element name (e.g., "Carbon"), case-insensitive
    if isinstance(identifier, str):
        by_name = {k.lower(): v for k, v in lookup.items()}
        if identifier.strip().lower() in by_name:
            return by_name[identifier.strip().lower()]

        # Element symbol (e.g., "C")
        by_symbol = {v["symbol"]: v for v in lookup.values()}
        if identifier.strip() in by_symbol:
            return by_symbol[identifier.strip()]

    # Atomic number (e.g., 6 or "6")
    if isinstance(identifier, (int, str)) and not isinstance(identifier, bool) and str(identifier).strip().isdigit():
        atomic_number = int(identifier)
        match = next((v for v in lookup.values() if v["atomic_number"] == atomic_number), None)
        if match:
            return match
        raise ValueError(f"No element found with atomic number {atomic_number}")

    raise ValueError(f"Unknown element identifier: {identifier}")


def resolve_element(identifier: Union[str, int]) -> ElementEntry:
    """
    Resolve an element identifier to its (Z, A) entry.

    :param identifier: Element name, symbol or atomic number.
    :type identifier: str or int
    :returns: Entry with the standard atomic mass of the element.
    :rtype: ElementEntry
    :raises ValueError: If the element cannot be resolved.
    """
    record = _find_record(identifier)
    return ElementEntry(record["atomic_number"], float(record["atomic_mass"]))


def element_symbol(identifier: Union[str, int]) -> str:
    """
    Get the chemical symbol of an element.

    :param identifier: Element name, symbol or atomic number.
    :returns: Element symbol, e.g. "Pb".
    :raises ValueError: If the element cannot be resolved.
    """
    return _find_record(identifier)["symbol"]
