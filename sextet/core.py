# Licensed under the GPLv3 - see LICENSE
"""Base64 encoding and decoding of byte buffers.

The two main functions are `encode`, which turns bytes into Base64 text,
and `decode`, which recovers the bytes from the text, ignoring any
whitespace.  Both return a named tuple with the result and its length.
`TextInfo` describes a piece of Base64 text without decoding it.
"""
from collections import namedtuple
import warnings

import numpy as np
from astropy.utils import lazyproperty

from .alphabet import PAD, INVALID, values
from .errors import (Base64Error, InvalidLengthError, InvalidCharacterError,
                     TruncatedGroupError)
from .utils import byte_array, text_codes, encoded_length, decoded_length
from .whitespace import strip_whitespace
from .words import encode_word, decode_word, encode_words, decode_words


__all__ = ['Encoded', 'Decoded', 'encode', 'decode', 'check_codes',
           'TextInfo']


Encoded = namedtuple('Encoded', 'text length')
Decoded = namedtuple('Decoded', 'data length')


def encode(data):
    """Encode data as Base64 text.

    Parameters
    ----------
    data : bytes, bytearray, memoryview, ~numpy.ndarray, or iterable of int
        Data to encode.  Arrays are encoded using their bytes in memory.

    Returns
    -------
    text : str
        Base64 text of length ``4 * ceil(len(data) / 3)``, with padding
        if the number of bytes is not a multiple of 3.
    length : int
        Number of characters in ``text``.

    Examples
    --------
    >>> encode(b'Man')
    Encoded(text='TWFu', length=4)
    >>> encode(b'M')
    Encoded(text='TQ==', length=4)
    """
    data = byte_array(data)
    nrest = data.size % 3
    nfull = data.size - nrest
    result = np.empty(encoded_length(data.size), np.uint8)
    result[:nfull // 3 * 4] = encode_words(data[:nfull])
    if nrest:
        result[-4:] = np.frombuffer(
            encode_word(data[nfull:].tobytes(), nrest).encode('ascii'),
            dtype=np.uint8)
    text = result.tobytes().decode('ascii')
    return Encoded(text, len(text))


def check_codes(codes, allow_empty=True):
    """Check that character codes form decodable Base64 text.

    Parameters
    ----------
    codes : `~numpy.ndarray`
        Character codes, with whitespace already removed.
    allow_empty : bool
        Whether an empty text is acceptable.  Default: `True`.

    Returns
    -------
    nlast : int
        Number of bytes encoded in the final word (0 for empty text).

    Raises
    ------
    InvalidLengthError
        If the number of characters is not a multiple of 4, or is zero
        while ``allow_empty=False``.
    InvalidCharacterError
        If a character outside the alphabet is found where data is needed.
    TruncatedGroupError
        If padding occurs anywhere but at the end of the final word.

    Notes
    -----
    Words are checked left to right; the first problem found determines the
    exception.  If the third character of the final word is padding, the
    fourth is ignored, with a warning if it is not padding as well.
    """
    nchars = len(codes)
    if nchars % 4 or (nchars == 0 and not allow_empty):
        raise InvalidLengthError(
            "Base64 text without whitespace should have a positive length "
            "that is a multiple of 4, not {0}.".format(nchars))
    if nchars == 0:
        return 0

    groups = codes.reshape(-1, 4)
    pad = groups == ord(PAD)
    bad = pad | (values(groups) == INVALID)
    # Padding is only allowed at the end of the final word.
    last = pad[-1]
    if last[2]:
        bad[-1, 2:] = False
        nlast = 1
        if not last[3]:
            warnings.warn("ignoring character following padding in the "
                          "final word of the Base64 text.")
    elif last[3]:
        bad[-1, 3] = False
        nlast = 2
    else:
        nlast = 3

    if bad.any():
        if pad.flat[bad.argmax()]:
            raise TruncatedGroupError(
                "padding found before the end of the Base64 text.")
        raise InvalidCharacterError("invalid character in Base64 text.")

    return nlast


def decode(text, length=None, *, allow_empty=True):
    """Decode Base64 text.

    Parameters
    ----------
    text : str, bytes, bytearray, memoryview or ~numpy.ndarray
        Text to decode, possibly including spaces, tabs, carriage returns
        and newlines, which are ignored.  An array should hold character
        codes.
    length : int, optional
        Number of characters of ``text`` to use.  Default: all.
    allow_empty : bool, optional
        Whether text that is empty after removing whitespace should be
        decoded to empty data.  If `False`, it raises an error instead.
        Default: `True`.

    Returns
    -------
    data : bytes
        Decoded data.
    length : int
        Number of bytes in ``data``.

    Raises
    ------
    ~sextet.errors.Base64Error
        If the text is not valid Base64.  See `check_codes` for the
        possible subclasses.

    Examples
    --------
    >>> decode('TWFu\\nTQ==')
    Decoded(data=b'ManM', length=4)
    """
    codes = strip_whitespace(text_codes(text, length))
    nlast = check_codes(codes, allow_empty=allow_empty)
    if nlast == 0:
        return Decoded(b'', 0)

    nbytes = decoded_length(len(codes), 3 - nlast)
    nbody = nbytes - nlast
    result = np.empty(nbytes, np.uint8)
    result[:nbody] = decode_words(values(codes[:-4]))
    result[nbody:] = np.frombuffer(decode_word(codes[-4:]), dtype=np.uint8)
    return Decoded(result.tobytes(), nbytes)


class TextInfo:
    """Information about Base64 text, gathered without decoding it.

    All attributes are evaluated only when needed.  Getting them never
    raises an exception or emits a warning for invalid Base64; instead,
    the exception that decoding would raise is stored in ``error``.

    Parameters
    ----------
    text : str, bytes, bytearray, memoryview or ~numpy.ndarray
        Base64 text, possibly including whitespace.
    length : int, optional
        Number of characters of ``text`` to use.  Default: all.

    Examples
    --------
    >>> info = TextInfo('TWFu TWE=')
    >>> info.nchars, info.npad, info.nbytes
    (8, 1, 5)
    >>> TextInfo('TWF!').error
    InvalidCharacterError('invalid character in Base64 text.')
    """

    def __init__(self, text, length=None):
        self._text = text
        self._length = length

    @lazyproperty
    def codes(self):
        """Character codes, with whitespace removed."""
        return strip_whitespace(text_codes(self._text, self._length))

    @lazyproperty
    def nchars(self):
        """Number of characters, not counting whitespace."""
        return len(self.codes)

    @lazyproperty
    def ngroups(self):
        """Number of complete 4-character words."""
        return self.nchars // 4

    @lazyproperty
    def _nlast(self):
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            try:
                return check_codes(self.codes)
            except Base64Error as exc:
                return exc

    @lazyproperty
    def error(self):
        """Exception that decoding would raise, or `None` if it is valid."""
        return self._nlast if isinstance(self._nlast, Exception) else None

    @property
    def valid(self):
        """Whether the text can be decoded."""
        return self.error is None

    @lazyproperty
    def npad(self):
        """Number of padding characters (`None` if invalid)."""
        if not self.valid:
            return None
        return 3 - self._nlast if self._nlast else 0

    @lazyproperty
    def nbytes(self):
        """Number of bytes the text decodes to (`None` if invalid)."""
        if not self.valid:
            return None
        return decoded_length(self.nchars, self.npad)

    def __repr__(self):
        if self.valid:
            return ("<{0} nchars={1}, npad={2}, nbytes={3}>"
                    .format(self.__class__.__name__, self.nchars,
                            self.npad, self.nbytes))
        return ("<{0} nchars={1}, error={2!r}>"
                .format(self.__class__.__name__, self.nchars, self.error))
