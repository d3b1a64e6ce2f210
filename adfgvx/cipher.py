"""
ADFGVX: Substitution + Transposition
====================================
Fritz Nebel's field cipher, German Army, spring 1918. Georges Painvin
broke individual days of it by hand; the general solution came decades
later. A pedagogical cipher today, not a secure one.

    encrypt:  plaintext --stage 1--> symbol pairs --stage 2--> ciphertext
    decrypt:  ciphertext --stage 2^-1--> symbol pairs --stage 1^-1--> plaintext

Characters missing from the square are dropped on encryption and invalid
symbol pairs are dropped on decryption. Pass strict=True to raise instead.
"""

import logging
from typing import List

from .errors import (
    EmptyKeyError,
    InvalidSymbolPairError,
    MalformedCiphertextError,
    UnsupportedCharacterError,
)
from .stages.stage1_polybius import PolybiusTable, SquareLike, get_square
from .stages.stage2_transposition import columnar_decrypt, columnar_encrypt, key_order

logger = logging.getLogger(__name__)


class ADFGVXCipher:
    """ADFGVX cipher bound to one key and one Polybius square."""

    def __init__(self, key: str, square: SquareLike = None, strict: bool = False):
        if not key:
            raise EmptyKeyError()
        self._key    = key
        self._square = get_square(square)
        self.strict  = strict

    @property
    def key(self) -> str:
        return self._key

    @property
    def square(self) -> PolybiusTable:
        return self._square

    @property
    def key_order(self) -> List[int]:
        return key_order(self._key)

    def substitute(self, message: str) -> str:
        """Stage 1 forward: message -> flat stream of row/column symbols."""
        stream = []
        dropped = 0
        for i, ch in enumerate(message):
            pair = self._square.substitute(ch)
            if pair is None:
                if self.strict:
                    raise UnsupportedCharacterError(ch, i)
                dropped += 1
                continue
            stream.extend(pair)
        if dropped:
            logger.debug("Dropped %d unsupported characters", dropped)
        return "".join(stream)

    def unsubstitute(self, stream: str) -> str:
        """Stage 1 inverse: flat stream of symbol pairs -> message."""
        out = []
        for i in range(0, len(stream) - 1, 2):
            ch = self._square.unsubstitute(stream[i], stream[i + 1])
            if ch is None:
                if self.strict:
                    raise InvalidSymbolPairError(stream[i:i + 2], i)
                logger.debug("Skipping invalid pair %r at %d", stream[i:i + 2], i)
                continue
            out.append(ch)
        return "".join(out)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext. Returns a string over A D F G V X."""
        stream = self.substitute(plaintext)
        ciphertext = columnar_encrypt(stream, self._key)
        logger.debug("Encrypted %d chars -> %d symbols, key order %s",
                     len(plaintext), len(ciphertext), self.key_order)
        return ciphertext

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext produced by encrypt() with the same key and square."""
        if len(ciphertext) % 2:
            raise MalformedCiphertextError(
                f"Ciphertext length {len(ciphertext)} is odd; symbols come in pairs."
            )
        if self.strict:
            for i, ch in enumerate(ciphertext):
                if ch not in self._square.alphabet:
                    raise InvalidSymbolPairError(ch, i)
        stream = columnar_decrypt(ciphertext, self._key)
        plaintext = self.unsubstitute(stream)
        logger.debug("Decrypted %d symbols -> %d chars", len(ciphertext), len(plaintext))
        return plaintext

    def __repr__(self):
        return f"ADFGVXCipher(key_length={len(self._key)}, strict={self.strict})"


def encode(key: str, message: str, square: SquareLike = None, strict: bool = False) -> str:
    """Encrypt `message` under `key`. Pure function."""
    return ADFGVXCipher(key, square, strict).encrypt(message)


def decode(key: str, ciphertext: str, square: SquareLike = None, strict: bool = False) -> str:
    """Decrypt `ciphertext` under `key`. Pure function."""
    return ADFGVXCipher(key, square, strict).decrypt(ciphertext)
