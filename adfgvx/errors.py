"""
Error taxonomy for the ADFGVX cipher.

Every error is a ValueError: bad keys, bad squares and bad ciphertext are all
bad input, and callers that already catch ValueError keep working.
"""


class ADFGVXError(ValueError):
    """Base class for every error raised by the adfgvx package."""


class EmptyKeyError(ADFGVXError):
    def __init__(self):
        super().__init__("ADFGVX key must contain at least one character.")


class InvalidSquareError(ADFGVXError):
    """A Polybius square is not 6x6, repeats a character, or is unknown."""


class UnsupportedCharacterError(ADFGVXError):
    """Raised in strict mode when a plaintext character is not in the square."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Character {char!r} at position {position} is not in the Polybius square."
        )


class InvalidSymbolPairError(ADFGVXError):
    """
    Raised in strict mode when ciphertext holds a non-ADFGVX symbol.

    `symbols` is the offending text and `position` its index in the string
    that was being decoded: the ciphertext for decrypt(), the symbol stream
    for a direct unsubstitute() call.
    """

    def __init__(self, symbols: str, position: int):
        self.symbols = symbols
        self.position = position
        super().__init__(
            f"{symbols!r} at position {position} is not made of ADFGVX symbols."
        )


class MalformedCiphertextError(ADFGVXError):
    """Ciphertext length does not fit the column structure derived from the key."""
