"""
Stage 2 : TRANSPOSITION: Keyed Columnar
=======================================
The symbol stream from stage 1 is written row by row under the key, one
symbol per column, then read out column by column in the alphabetical
order of the key letters.

    key      U M            order: M (col 1), U (col 0)
    stream   D X
             G F            read col 1: X F F A A
             A F            read col 0: D G A A G
             A A
             G A            ciphertext: XFFAADGAAG

Repeated key letters keep their left-to-right order, so the permutation is
a stable sort of (letter, position). Nothing about the column layout is
transmitted: the decoder rebuilds it from the key and the ciphertext length.
"""

import logging
from typing import List, Sequence

from ..errors import EmptyKeyError

logger = logging.getLogger(__name__)

Columns = List[List[str]]


def key_order(key: str) -> List[int]:
    """
    Column indices sorted by key character, ties broken by original position.

    >>> key_order("CAB")
    [1, 2, 0]
    """
    if not key:
        raise EmptyKeyError()
    return sorted(range(len(key)), key=lambda i: (key[i], i))


def distribute(stream: Sequence[str], key_length: int) -> Columns:
    """Deal symbols round-robin: symbol i goes to column i % key_length."""
    if key_length < 1:
        raise EmptyKeyError()
    return [list(stream[c::key_length]) for c in range(key_length)]


def transpose(columns: Columns, key: str) -> Columns:
    """Reorder columns into key order. Column lengths travel with their columns."""
    return [columns[i] for i in key_order(key)]


def linearize(columns: Columns) -> str:
    return "".join("".join(col) for col in columns)


def column_sizes(length: int, key_length: int) -> List[int]:
    """
    Size of each column, by original index, for a stream of `length` symbols.

    Round-robin dealing gives the first `length % key_length` columns one
    symbol more than the rest.
    """
    if key_length < 1:
        raise EmptyKeyError()
    rows, extra = divmod(length, key_length)
    return [rows + 1 if c < extra else rows for c in range(key_length)]


def untranspose(ciphertext: str, key: str) -> Columns:
    """
    Slice the ciphertext back into columns stored under their original index.

    Chunks are read in key order; each chunk is as long as the column it
    came from. The sizes always sum to len(ciphertext), so every length
    slices cleanly.
    """
    sizes = column_sizes(len(ciphertext), len(key))
    columns: Columns = [[] for _ in key]
    pos = 0
    for c in key_order(key):
        columns[c] = list(ciphertext[pos:pos + sizes[c]])
        pos += sizes[c]
    return columns


def reflatten(columns: Columns) -> str:
    """Read columns back row by row, rebuilding the round-robin stream."""
    depth = max((len(col) for col in columns), default=0)
    out = []
    for r in range(depth):
        for col in columns:
            if r < len(col):
                out.append(col[r])
    return "".join(out)


def columnar_encrypt(stream: str, key: str) -> str:
    columns = distribute(stream, len(key))
    logger.debug("Distributed %d symbols into %d columns: sizes=%s",
                 len(stream), len(key), [len(c) for c in columns])
    return linearize(transpose(columns, key))


def columnar_decrypt(ciphertext: str, key: str) -> str:
    return reflatten(untranspose(ciphertext, key))
