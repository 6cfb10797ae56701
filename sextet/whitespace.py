# Licensed under the GPLv3 - see LICENSE
"""Removal of whitespace from Base64 text before decoding."""
import numpy as np


__all__ = ['WHITESPACE', 'is_whitespace', 'strip_whitespace']


WHITESPACE = ' \t\r\n'
"""Characters ignored when decoding."""

whitespace_codes = np.array([ord(c) for c in WHITESPACE], np.uint8)


def is_whitespace(c):
    """Whether the character (or character code) ``c`` is ignored."""
    if isinstance(c, (str, bytes)):
        return len(c) == 1 and ord(c) in whitespace_codes
    return c in whitespace_codes


def strip_whitespace(text):
    """Remove all whitespace from ``text``.

    Parameters
    ----------
    text : str, bytes or `~numpy.ndarray`
        Text to compact.  An array is taken to hold character codes.

    Returns
    -------
    compacted : str, bytes or `~numpy.ndarray`
        New instance of the same type as the input (`bytes` for a
        `bytearray`), with spaces, tabs, carriage returns and newlines
        removed.
    """
    if isinstance(text, str):
        return ''.join(c for c in text if c not in WHITESPACE)
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).translate(None, WHITESPACE.encode('ascii'))

    codes = np.asanyarray(text)
    return codes[~np.isin(codes, whitespace_codes)]
