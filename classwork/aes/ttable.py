"""AES-128 encryption using precomputed T-tables.

Each T-table folds SubBytes and MixColumns into one lookup per byte, so a
middle round is four lookups and XORs per column plus the round key.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache, reduce

from classwork.aes.cipher import (
    ROUNDS,
    SBOX,
    State,
    Word,
    add_round_key,
    expand_key,
    gf_multiply,
    state_from_bytes,
    state_to_bytes,
    xor_words,
)

Table = tuple[Word, ...]


@lru_cache(maxsize=None)
def make_tables() -> tuple[Table, Table, Table, Table]:
    """Build the four 256-entry T-tables.

    ``T0[x]`` is the column ``(2s, s, s, 3s)`` with ``s = SBOX[x]``; table
    ``Tk`` holds the same column rotated down by ``k`` bytes.
    """
    columns = [
        (gf_multiply(s, 2), s, s, gf_multiply(s, 3))
        for s in SBOX
    ]

    def rotated(shift: int) -> Table:
        if shift == 0:
            return tuple(columns)
        return tuple(column[-shift:] + column[:-shift] for column in columns)

    return rotated(0), rotated(1), rotated(2), rotated(3)


def _table_round(
    state: State,
    tables: Sequence[Table],
    keys: Sequence[Word],
) -> State:
    return [
        list(
            reduce(
                xor_words,
                (tables[r][state[(c + r) % 4][r]] for r in range(4)),
                keys[c],
            )
        )
        for c in range(4)
    ]


def _final_round(state: State, keys: Sequence[Word]) -> State:
    return [
        [SBOX[state[(c + r) % 4][r]] ^ keys[c][r] for r in range(4)]
        for c in range(4)
    ]


def _run(state: State, round_keys: Sequence[Word]) -> Iterator[tuple[int, State]]:
    tables = make_tables()
    state = add_round_key(state, round_keys, 0)
    yield 0, state
    for round_number in range(1, ROUNDS):
        keys = round_keys[4 * round_number:4 * round_number + 4]
        state = _table_round(state, tables, keys)
        yield round_number, state
    yield ROUNDS, _final_round(state, round_keys[4 * ROUNDS:4 * ROUNDS + 4])


def table_rounds(plaintext: Iterable[int], key: Iterable[int]) -> Iterator[tuple[int, State]]:
    """Yield (round, state) after each round of T-table encryption.

    Round 0 is the state after the initial AddRoundKey; round 10 is the
    ciphertext state.
    """
    round_keys = expand_key(key)
    state = state_from_bytes(plaintext)
    return _run(state, round_keys)


def encrypt_block_ttable(plaintext: Iterable[int], key: Iterable[int]) -> bytes:
    """Encrypt one 16-byte block with a 16-byte key using T-tables."""
    *_, (_, state) = table_rounds(plaintext, key)
    return state_to_bytes(state)