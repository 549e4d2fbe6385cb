"""Conversion errors."""


class SieveConversionError(Exception):
    """Base class for every failure raised while simplifying a sieve tree."""


class InvalidInputError(SieveConversionError):
    """The tree is malformed or declares something we don't recognize at all."""


class UnsupportedRepresentationError(SieveConversionError):
    """The tree is valid sieve but outside the subset the simple model supports."""
