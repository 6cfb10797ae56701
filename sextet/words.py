# Licensed under the GPLv3 - see LICENSE
"""Encoders and decoders for Base64 words.

A word is the unit of conversion: 3 bytes (24 bits) on the binary side,
4 characters (4 times 6 bits) on the text side.  The scalar functions
`encode_word` and `decode_word` convert a single word, including the
padded final one; `encode_words` and `decode_words` convert any number of
complete words at once.
"""
from operator import index

import numpy as np

from .alphabet import ALPHABET, PAD, INVALID, lut_symbol, value


__all__ = ['encode_word', 'decode_word', 'encode_words', 'decode_words']


_PAD_CODE = ord(PAD)


def encode_word(group, nreal=3):
    """Encode one group of bytes into 4 Base64 characters.

    Parameters
    ----------
    group : bytes or iterable of int
        Up to 3 bytes.  Missing bytes are taken to be zero.
    nreal : int
        Number of real bytes in the group, 1, 2 or 3.  Bytes beyond
        ``nreal`` are treated as zero.  If less than 3, the group is
        the final one and the output gets padded: one real byte gives
        two ``=`` characters, two real bytes give one.

    Returns
    -------
    word : str
        The 4 encoded characters.
    """
    group = bytes(group)
    nreal = index(nreal)
    if len(group) > 3:
        raise ValueError("a word holds at most 3 bytes, got {0}."
                         .format(len(group)))
    if not 1 <= nreal <= 3:
        raise ValueError("number of real bytes should be 1, 2 or 3, not {0}."
                         .format(nreal))

    word = int.from_bytes(group[:nreal].ljust(3, b'\0'), 'big')
    chars = [ALPHABET[(word >> 18) & 0x3f],
             ALPHABET[(word >> 12) & 0x3f],
             ALPHABET[(word >> 6) & 0x3f],
             ALPHABET[word & 0x3f]]
    # n real bytes need n+1 characters; the rest is padding.
    chars[nreal+1:] = PAD * (3 - nreal)
    return ''.join(chars)


def decode_word(chars):
    """Decode 4 Base64 characters into at most 3 bytes.

    Parameters
    ----------
    chars : str, bytes or iterable of int
        Four characters, or their codes.

    Returns
    -------
    data : bytes
        Three bytes for a complete word, one or two if the third or fourth
        character is the padding character ``=``.  Empty if a character
        needed for the decoding is not in the alphabet, which signals
        corrupt input.

    Notes
    -----
    If the third character is ``=``, the fourth is not examined at all.
    The padding character carries no data, so it is not accepted as the
    first or second character.
    """
    if isinstance(chars, str):
        codes = [ord(c) for c in chars]
    else:
        codes = [index(c) for c in chars]
    if len(codes) != 4:
        raise ValueError("a word consists of 4 characters, got {0}."
                         .format(len(codes)))

    if _PAD_CODE in codes[:2]:
        return b''
    v0, v1 = value(codes[0]), value(codes[1])
    if v0 == INVALID or v1 == INVALID:
        return b''

    b0 = (v0 << 2) | (v1 >> 4)
    if codes[2] == _PAD_CODE:
        return bytes([b0])

    v2 = value(codes[2])
    if v2 == INVALID:
        return b''

    b1 = ((v1 & 0x0f) << 4) | (v2 >> 2)
    if codes[3] == _PAD_CODE:
        return bytes([b0, b1])

    v3 = value(codes[3])
    if v3 == INVALID:
        return b''

    b2 = ((v2 & 0x03) << 6) | v3
    return bytes([b0, b1, b2])


shift_byte = np.array([16, 8, 0], np.uint32)
shift_sextet = np.array([18, 12, 6, 0], np.uint32)


def encode_words(data):
    """Encode complete 3-byte words, without any padding.

    Parameters
    ----------
    data : `~numpy.ndarray`
        Array of ``uint8`` whose size is a multiple of 3.

    Returns
    -------
    codes : `~numpy.ndarray`
        Array of ``uint8`` ASCII codes, 4 for every 3 input bytes.
    """
    data = np.asanyarray(data, dtype=np.uint8)
    if data.size % 3:
        raise ValueError("can only encode complete words, but got {0} bytes."
                         .format(data.size))
    b = data.reshape(-1, 3).astype(np.uint32)
    words = np.bitwise_or.reduce(b << shift_byte, axis=-1)
    sextets = (words[:, np.newaxis] >> shift_sextet) & 0x3f
    return lut_symbol.take(sextets).ravel()


def decode_words(values):
    """Decode complete 4-character words, without any padding.

    Parameters
    ----------
    values : `~numpy.ndarray`
        Array of 6-bit values (i.e., characters already passed through
        `~sextet.alphabet.values`), with a size that is a multiple of 4.

    Returns
    -------
    data : `~numpy.ndarray`
        Array of ``uint8``, 3 bytes for every 4 input values.
    """
    values = np.asanyarray(values)
    if values.size % 4:
        raise ValueError("can only decode complete words, but got {0} "
                         "characters.".format(values.size))
    if values.size and values.max() > 0x3f:
        raise ValueError("words to decode should contain 6-bit values only.")
    v = values.reshape(-1, 4).astype(np.uint32)
    words = np.bitwise_or.reduce(v << shift_sextet, axis=-1)
    return (((words[:, np.newaxis] >> shift_byte) & 0xff)
            .astype(np.uint8).ravel())
