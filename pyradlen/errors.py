"""
Exception types raised by pyRadLen.

All errors derive from :class:`RadiationLengthError`, itself a :class:`ValueError`,
so code written against plain ``ValueError`` keeps working.

- :class:`InvalidAtomicNumberError`: Z is not a positive integer.
- :class:`InvalidAtomicMassError`: A is not a finite positive number.
- :class:`EmptyCompositionError`: composite computation on a table without entries.
- :class:`MalformedCompositionError`: non-numeric, incomplete or out-of-range composition rows.
- :class:`UnknownMaterialError`: name not found in the material dictionary.
"""

from typing import Optional


class RadiationLengthError(ValueError):
    """Base class for every error raised by pyRadLen."""


class InvalidAtomicNumberError(RadiationLengthError):
    """
    Raised when an atomic number is not an integer between 1 and 120.

    :ivar atomic_number: The rejected value.
    """

    def __init__(self, atomic_number, message: Optional[str] = None):
        self.atomic_number = atomic_number
        super().__init__(message or f"Invalid atomic number: {atomic_number!r}. Z must be an integer between 1 and 120.")


class InvalidAtomicMassError(RadiationLengthError):
    """
    Raised when an atomic mass is not a finite positive number.

    :ivar atomic_mass: The rejected value.
    """

    def __init__(self, atomic_mass, message: Optional[str] = None):
        self.atomic_mass = atomic_mass
        super().__init__(message or f"Invalid atomic mass: {atomic_mass!r}. A must be a finite number > 0.")


class EmptyCompositionError(RadiationLengthError):
    """Raised when a composite radiation length is requested for an empty composition."""

    def __init__(self, message: str = "Composition has no entries: the radiation length is undefined."):
        super().__init__(message)


class MalformedCompositionError(RadiationLengthError):
    """
    Raised when a composition source contains invalid rows.

    :ivar path: File the row comes from, if any.
    :ivar line_number: 1-based line number of the offending row, if any.
    """

    def __init__(self, message: str, path: Optional[str] = None, line_number: Optional[int] = None):
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}"
            if line_number is not None:
                location += f", line {line_number}"
            location += ": "
        super().__init__(f"{location}{message}")


class UnknownMaterialError(RadiationLengthError, KeyError):
    """Raised when a predefined material name is not in the material dictionary."""

    def __init__(self, name: str, available=None):
        self.name = name
        message = f"Unknown material: '{name}'."
        if available:
            message += f" Available materials: {', '.join(available)}"
        self.message = message
        super().__init__(message)

    def __str__(self):
        # KeyError would otherwise quote the message
        return self.message
