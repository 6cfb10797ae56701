# Licensed under the GPLv3 - see LICENSE
"""Base64 encoding and decoding, one 24-bit word at a time."""

from .core import encode, decode, TextInfo, Encoded, Decoded  # noqa
from .errors import *  # noqa

try:
    from .version import version as __version__
except ImportError:
    __version__ = ''

# Define minima for the documentation, but do not bother to explicitly check.
__minimum_python_version__ = '3.10'
__minimum_astropy_version__ = '5.1'
__minimum_numpy_version__ = '1.24'
