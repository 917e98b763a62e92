"""Conversion errors."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for errors that fail a whole conversion; there is no partial result."""


class EmptyInputError(ConversionError):
    """Markup is missing or blank after trimming."""

    def __init__(self, message: str = "Empty XML.") -> None:
        super().__init__(message)


class InvalidMarkupError(ConversionError):
    """The XML parser rejected the markup."""

    def __init__(self, message: str = "Invalid XML.") -> None:
        super().__init__(message)


class PathDataError(ValueError):
    """Path data stopped parsing at a bad token.

    Never fails a conversion: the normalizer keeps the commands read before it.
    """
