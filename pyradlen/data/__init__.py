# This file marks this directory as a Python package
"""
Data resources for pyRadLen.

Contents
--------

- ``elements.json``:
  Lookup table mapping element names to symbol, atomic number and standard
  atomic mass (g/mol). Used to resolve element identifiers given by name,
  symbol or atomic number. Atomic weights are based on values published by
  the IUPAC: https://ciaaw.org/atomic-weights.htm

- ``materials.json``:
  Dictionary of predefined materials: description, density (g/cm³) and
  elemental composition as ``[Z, A, mass fraction %]`` rows. Compositions
  follow the Particle Data Group atomic and nuclear properties tables.
  Loaded by :class:`~pyradlen.io.materials.MaterialDictionary`.
"""
