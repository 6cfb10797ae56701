# Licensed under the GPLv3 - see LICENSE
"""Exceptions raised when Base64 text cannot be decoded."""

__all__ = ['Base64Error', 'InvalidLengthError', 'InvalidCharacterError',
           'TruncatedGroupError']


class Base64Error(ValueError):
    """Base class for all failures to decode Base64 text."""


class InvalidLengthError(Base64Error):
    """Text without whitespace does not have a positive multiple of 4 length.
    """


class InvalidCharacterError(Base64Error):
    """A character outside the alphabet appears where data is needed."""


class TruncatedGroupError(Base64Error):
    """Padding appears before the end of the text."""
