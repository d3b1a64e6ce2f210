"""
adfgvx
======
The ADFGVX field cipher (1918), in two stages.

Stages:
    1  SUBSTITUTION   : 6x6 Polybius square, labels A D F G V X
    2  TRANSPOSITION  : keyed columnar, columns read in key order

    >>> from adfgvx import encode, decode
    >>> encode("UM", "LUCAS")
    'XFFAADGAAG'
    >>> decode("UM", "XFFAADGAAG")
    'LUCAS'

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import (
    ADFGVXError,
    EmptyKeyError,
    InvalidSquareError,
    InvalidSymbolPairError,
    MalformedCiphertextError,
    UnsupportedCharacterError,
)
from .stages.stage1_polybius       import ALPHABET, SQUARES, PolybiusTable, get_square
from .stages.stage2_transposition  import key_order
from .cipher                       import ADFGVXCipher, encode, decode

__all__ = [
    "ADFGVXCipher",
    "encode",
    "decode",
    "key_order",
    "PolybiusTable",
    "get_square",
    "ALPHABET",
    "SQUARES",
    "ADFGVXError",
    "EmptyKeyError",
    "InvalidSquareError",
    "InvalidSymbolPairError",
    "MalformedCiphertextError",
    "UnsupportedCharacterError",
]
