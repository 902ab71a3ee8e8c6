"""
Utility submodule for pyRadLen.

Modules
-------

- :mod:`validation`:
  Checks for atomic numbers, atomic masses and mass fractions, shared by the
  physics functions and :class:`~pyradlen.io.composition.CompositionTable`.
"""
