"""
Error hierarchy for barcode encoding and decoding.
"""


class Barcode1DError(Exception):
    """Base class for every error raised by barcode1d."""


class UnencodableError(Barcode1DError):
    """The value cannot be represented in the requested symbology."""


class UnencodableCharactersError(UnencodableError):
    """
    The value holds characters outside the symbology's alphabet.

    Also raised by decoders when a pattern string is garbage: wrong
    alphabet, wrong length, or guard patterns that are not where they
    should be.
    """


class ValueTooLongError(UnencodableCharactersError):
    """The value exceeds the symbology's maximum length."""


class ValueTooShortError(UnencodableCharactersError):
    """The value is shorter than the symbology's minimum length."""


class ChecksumError(Barcode1DError):
    """A supplied check digit does not match the computed one."""


class UndecodableCharactersError(Barcode1DError):
    """
    The pattern has the right overall shape but a chunk, parity sequence
    or embedded checksum could not be resolved.
    """


class UnsupportedOperationError(Barcode1DError, NotImplementedError):
    """The symbology has no such representation or checksum."""
