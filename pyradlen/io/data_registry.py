"""
Discovery and loading of the bundled data files.

This module provides functions to:

- Locate files shipped in :mod:`pyradlen.data`
- Load the `elements.json` periodic table lookup
- Load the `materials.json` dictionary of predefined materials

All file paths are resolved using :mod:`importlib.resources`, making them portable
within installed packages or local development environments.
"""

import os
import json
import logging
from typing import Dict

logger = logging.getLogger(__name__)

ELEMENTS_FILE = "elements.json"
MATERIALS_FILE = "materials.json"


def get_data_path(filename: str) -> str:
    """
    Locate a file bundled in :mod:`pyradlen.data`.

    Tries first to resolve the file within the installed package.
    Falls back to a local relative path (for development use) if needed.

    :param filename: Name of the data file (e.g. "materials.json").
    :type filename: str

    :returns: Path to the located file.
    :rtype: str

    :raises FileNotFoundError: If the file cannot be found in either location.
    """
    try:
        from importlib.resources import files
        path = files("pyradlen.data").joinpath(filename)
        if path.is_file():
            return str(path)
    except (ImportError, ModuleNotFoundError, TypeError) as e:
        logger.debug("importlib.resources lookup of %s failed: %s", filename, e)

    # Local fallback (e.g. during development)
    local = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "data", filename))
    if os.path.exists(local):
        return local

    raise FileNotFoundError(f"Cannot find data file '{filename}'")


def _load_json(filename: str) -> Dict[str, Dict]:
    path = get_data_path(filename)
    with open(path, "r") as f:
        return json.load(f)


def load_lookup_table() -> Dict[str, Dict]:
    """
    Load the chemical elements lookup table from a JSON file.

    :returns: Dictionary mapping element names to symbol, atomic number and atomic mass.
    :rtype: dict[str, dict]

    :raises FileNotFoundError: If the elements.json file cannot be found.
    :raises json.JSONDecodeError: If the file content is not valid JSON.
    """
    return _load_json(ELEMENTS_FILE)


def load_material_dictionary() -> Dict[str, Dict]:
    """
    Load the dictionary of predefined materials from a JSON file.

    Each record holds ``description``, ``density`` (g/cm³) and ``composition``,
    a list of ``[Z, A, mass fraction %]`` rows.

    :returns: Dictionary mapping material names to their records.
    :rtype: dict[str, dict]

    :raises FileNotFoundError: If the materials.json file cannot be found.
    :raises json.JSONDecodeError: If the file content is not valid JSON.
    """
    return _load_json(MATERIALS_FILE)
