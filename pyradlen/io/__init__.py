"""
I/O submodule for pyRadLen.

This package provides the data structures and loaders that feed the radiation
length computation.

Modules
-------

- :mod:`composition`:
  Defines :class:`~pyradlen.io.composition.ElementEntry` and
  :class:`~pyradlen.io.composition.CompositionTable`, with parsing of
  three-column composition files.

- :mod:`data_registry`:
  Functions locating and loading the bundled ``elements.json`` and
  ``materials.json`` files.

- :mod:`elements`:
  Resolution of element names, symbols and atomic numbers.

- :mod:`materials`:
  The :class:`~pyradlen.io.materials.MaterialDictionary` of predefined materials.
"""

from .composition import CompositionTable, ElementEntry
from .materials import Material, MaterialDictionary

__all__ = ["CompositionTable", "ElementEntry", "Material", "MaterialDictionary"]
