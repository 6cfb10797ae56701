# Licensed under the GPLv3 - see LICENSE
from operator import index

import numpy as np


__all__ = ['byte_array', 'text_codes', 'encoded_length', 'decoded_length']


def byte_array(data):
    """Convert the data to a flat byte array.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, ~numpy.ndarray, or iterable of int
        Data to convert.  For buffers and arrays, a byte view is taken.
        Integers have to be in the range 0-255.

    Returns
    -------
    byte_array : `~numpy.ndarray` of uint8
    """
    if isinstance(data, str):
        raise TypeError("cannot encode str directly; encode it to bytes "
                        "first.")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    if isinstance(data, (np.ndarray, np.generic)):
        # Quick turn-around for input that is OK already:
        return np.ascontiguousarray(np.atleast_1d(data)).view('u1').ravel()

    data = np.array(list(data), ndmin=1)
    if data.size == 0:
        return np.zeros(0, np.uint8)
    if data.dtype.kind not in 'iu':
        raise TypeError("can only encode integers, not {0}."
                        .format(data.dtype))
    if data.min() < 0 or data.max() > 255:
        raise ValueError('values have to fit in 8 bit unsigned int.')
    return data.astype(np.uint8)


def text_codes(text, length=None):
    """Convert Base64 text to an array of character codes.

    Parameters
    ----------
    text : str, bytes, bytearray, memoryview or ~numpy.ndarray
        Text to convert.  An array should hold integer character codes.
    length : int, optional
        Number of characters to use from the start of ``text``.
        Default: all of them.

    Returns
    -------
    codes : `~numpy.ndarray`
        Of ``uint8`` for ASCII input, of a wider unsigned type otherwise.
    """
    if isinstance(text, str):
        if text.isascii():
            codes = np.frombuffer(text.encode('ascii'), dtype=np.uint8)
        else:
            codes = np.array([ord(c) for c in text], dtype=np.uint32)
    elif isinstance(text, (bytes, bytearray, memoryview)):
        codes = np.frombuffer(text, dtype=np.uint8)
    elif isinstance(text, np.ndarray):
        if text.dtype.kind not in 'iu':
            raise TypeError("character codes should be integers, not {0}."
                            .format(text.dtype))
        codes = text.ravel()
    else:
        raise TypeError("cannot decode {0} instance as Base64 text."
                        .format(type(text).__name__))

    if length is not None:
        length = index(length)
        if not 0 <= length <= len(codes):
            raise ValueError("length should be between 0 and {0}, not {1}."
                             .format(len(codes), length))
        codes = codes[:length]
    return codes


def encoded_length(nbytes):
    """Number of Base64 characters needed to encode ``nbytes`` bytes."""
    nbytes = index(nbytes)
    if nbytes < 0:
        raise ValueError("number of bytes cannot be negative.")
    return 4 * ((nbytes + 2) // 3)


def decoded_length(nchars, npad=0):
    """Number of bytes encoded by ``nchars`` characters with ``npad`` padding.

    Whitespace should not be included in ``nchars``.
    """
    nchars, npad = index(nchars), index(npad)
    if nchars < 0 or nchars % 4:
        raise ValueError("number of characters should be a non-negative "
                         "multiple of 4, not {0}.".format(nchars))
    if not 0 <= npad <= min(2, nchars):
        raise ValueError("number of padding characters should be 0, 1 or 2 "
                         "for a non-empty text, not {0}.".format(npad))
    return nchars // 4 * 3 - npad
