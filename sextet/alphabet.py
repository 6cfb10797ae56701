# Licensed under the GPLv3 - see LICENSE
"""The Base64 alphabet and its look-up tables.

The 64 symbols map one-to-one onto 6-bit values, in the order ``A-Z``,
``a-z``, ``0-9``, ``+``, ``/``.  The padding character ``=`` is not part
of the alphabet; it decodes to 0 but only marks the end of a short final
word.
"""
from operator import index

import numpy as np


__all__ = ['ALPHABET', 'PAD', 'INVALID', 'init_luts', 'lut_symbol',
           'lut_value', 'symbol', 'value', 'values']


ALPHABET = ('ABCDEFGHIJKLMNOPQRSTUVWXYZ'
            'abcdefghijklmnopqrstuvwxyz'
            '0123456789+/')
"""Symbols for the 6-bit values 0 to 63."""
PAD = '='
"""Padding character for short final words."""
INVALID = 0xff
"""Look-up result for characters that are neither in the alphabet nor ``=``.
"""


def init_luts():
    """Set up the look-up tables between 6-bit values and character codes.

    Returns
    -------
    lut_symbol : `~numpy.ndarray`
        Table of 64 ``uint8`` ASCII codes, indexed by 6-bit value.
    lut_value : `~numpy.ndarray`
        Table of 256 ``uint8`` 6-bit values, indexed by character code.
        Codes outside the alphabet hold `INVALID`, except for ``=``,
        which holds 0.

    Notes
    -----
    Both tables are made read-only, so they can be shared freely.  For
    instance, to find the symbol for the value 19 and back::

        >>> chr(lut_symbol[19])
        'T'
        >>> int(lut_value[ord('T')])
        19
    """
    lut_symbol = np.frombuffer(ALPHABET.encode('ascii'), dtype=np.uint8).copy()
    lut_value = np.full(256, INVALID, dtype=np.uint8)
    lut_value[lut_symbol] = np.arange(64, dtype=np.uint8)
    lut_value[ord(PAD)] = 0
    lut_symbol.flags.writeable = False
    lut_value.flags.writeable = False
    return lut_symbol, lut_value


lut_symbol, lut_value = init_luts()


def symbol(v):
    """Return the alphabet character for the 6-bit value ``v``."""
    v = index(v)
    if not 0 <= v < 64:
        raise ValueError("6-bit value should be in range 0-63, not {0}."
                         .format(v))
    return ALPHABET[v]


def value(c):
    """Return the 6-bit value for the character ``c``.

    Parameters
    ----------
    c : str, bytes or int
        A single character, given as a one-character string or bytes,
        or as its code.

    Returns
    -------
    value : int
        Between 0 and 63 for alphabet characters, 0 for the padding
        character ``=``, and `INVALID` for anything else.
    """
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise TypeError("expected a single character, got {0!r}."
                            .format(c))
        c = ord(c)
    else:
        c = index(c)
    return int(lut_value[c]) if 0 <= c < 256 else INVALID


def values(codes):
    """Vectorized version of `value` for an array of character codes.

    Codes outside the range 0-255 are mapped to `INVALID`.
    """
    codes = np.asanyarray(codes)
    if codes.dtype.itemsize == 1:
        return lut_value.take(codes.view(np.uint8))
    result = lut_value.take(np.clip(codes, 0, 255))
    result[(codes < 0) | (codes > 255)] = INVALID
    return result
