"""AES-128 block encryption built from the standard round transformations.

The state is a list of four columns, each a list of four byte values, so
``state[c][r]`` is the byte in column ``c`` and row ``r``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from operator import xor

Word = tuple[int, int, int, int]
State = list[list[int]]

BLOCK_SIZE = 16
KEY_SIZE = 16
NK = 4
ROUNDS = 10

SBOX: tuple[int, ...] = (
    0x63, 0x7C, 0x77, 0x7B, 0xF2, 0x6B, 0x6F, 0xC5, 0x30, 0x01, 0x67, 0x2B, 0xFE, 0xD7, 0xAB, 0x76,
    0xCA, 0x82, 0xC9, 0x7D, 0xFA, 0x59, 0x47, 0xF0, 0xAD, 0xD4, 0xA2, 0xAF, 0x9C, 0xA4, 0x72, 0xC0,
    0xB7, 0xFD, 0x93, 0x26, 0x36, 0x3F, 0xF7, 0xCC, 0x34, 0xA5, 0xE5, 0xF1, 0x71, 0xD8, 0x31, 0x15,
    0x04, 0xC7, 0x23, 0xC3, 0x18, 0x96, 0x05, 0x9A, 0x07, 0x12, 0x80, 0xE2, 0xEB, 0x27, 0xB2, 0x75,
    0x09, 0x83, 0x2C, 0x1A, 0x1B, 0x6E, 0x5A, 0xA0, 0x52, 0x3B, 0xD6, 0xB3, 0x29, 0xE3, 0x2F, 0x84,
    0x53, 0xD1, 0x00, 0xED, 0x20, 0xFC, 0xB1, 0x5B, 0x6A, 0xCB, 0xBE, 0x39, 0x4A, 0x4C, 0x58, 0xCF,
    0xD0, 0xEF, 0xAA, 0xFB, 0x43, 0x4D, 0x33, 0x85, 0x45, 0xF9, 0x02, 0x7F, 0x50, 0x3C, 0x9F, 0xA8,
    0x51, 0xA3, 0x40, 0x8F, 0x92, 0x9D, 0x38, 0xF5, 0xBC, 0xB6, 0xDA, 0x21, 0x10, 0xFF, 0xF3, 0xD2,
    0xCD, 0x0C, 0x13, 0xEC, 0x5F, 0x97, 0x44, 0x17, 0xC4, 0xA7, 0x7E, 0x3D, 0x64, 0x5D, 0x19, 0x73,
    0x60, 0x81, 0x4F, 0xDC, 0x22, 0x2A, 0x90, 0x88, 0x46, 0xEE, 0xB8, 0x14, 0xDE, 0x5E, 0x0B, 0xDB,
    0xE0, 0x32, 0x3A, 0x0A, 0x49, 0x06, 0x24, 0x5C, 0xC2, 0xD3, 0xAC, 0x62, 0x91, 0x95, 0xE4, 0x79,
    0xE7, 0xC8, 0x37, 0x6D, 0x8D, 0xD5, 0x4E, 0xA9, 0x6C, 0x56, 0xF4, 0xEA, 0x65, 0x7A, 0xAE, 0x08,
    0xBA, 0x78, 0x25, 0x2E, 0x1C, 0xA6, 0xB4, 0xC6, 0xE8, 0xDD, 0x74, 0x1F, 0x4B, 0xBD, 0x8B, 0x8A,
    0x70, 0x3E, 0xB5, 0x66, 0x48, 0x03, 0xF6, 0x0E, 0x61, 0x35, 0x57, 0xB9, 0x86, 0xC1, 0x1D, 0x9E,
    0xE1, 0xF8, 0x98, 0x11, 0x69, 0xD9, 0x8E, 0x94, 0x9B, 0x1E, 0x87, 0xE9, 0xCE, 0x55, 0x28, 0xDF,
    0x8C, 0xA1, 0x89, 0x0D, 0xBF, 0xE6, 0x42, 0x68, 0x41, 0x99, 0x2D, 0x0F, 0xB0, 0x54, 0xBB, 0x16,
)

MIX_COLUMN_MATRIX: tuple[tuple[int, int, int, int], ...] = (
    (0x02, 0x03, 0x01, 0x01),
    (0x01, 0x02, 0x03, 0x01),
    (0x01, 0x01, 0x02, 0x03),
    (0x03, 0x01, 0x01, 0x02),
)

RCON: tuple[Word, ...] = tuple(
    (value, 0x00, 0x00, 0x00)
    for value in (0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)
)


def gf_multiply(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    result = 0
    for bit in range(8):
        if (b >> bit) & 1:
            result ^= a
        a = ((a << 1) ^ 0x1B) & 0xFF if a & 0x80 else (a << 1) & 0xFF
    return result


def rot_word(word: Sequence[int]) -> Word:
    """Rotate a word one byte to the left."""
    return tuple(word[1:]) + (word[0],)  # type: ignore[return-value]


def sub_word(word: Iterable[int]) -> Word:
    """Apply the S-box to every byte of a word."""
    return tuple(SBOX[b] for b in word)  # type: ignore[return-value]


def xor_words(first: Iterable[int], second: Iterable[int]) -> Word:
    """XOR two words byte by byte."""
    return tuple(a ^ b for a, b in zip(first, second))  # type: ignore[return-value]


def _checked_block(data: Iterable[int], what: str) -> bytes:
    block = bytes(data)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"{what} must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def expand_key(key: Iterable[int]) -> list[Word]:
    """Expand a 16-byte key into the 44 words of the AES-128 key schedule."""
    raw = _checked_block(key, "key")
    words: list[Word] = [tuple(raw[i:i + 4]) for i in range(0, KEY_SIZE, 4)]  # type: ignore[misc]
    for i in range(NK, NK * (ROUNDS + 1)):
        temp = words[i - 1]
        if i % NK == 0:
            temp = xor_words(sub_word(rot_word(temp)), RCON[i // NK])
        words.append(xor_words(temp, words[i - NK]))
    return words


def state_from_bytes(data: Iterable[int]) -> State:
    """Arrange 16 bytes column by column into a 4x4 state."""
    block = _checked_block(data, "block")
    return [list(block[i:i + 4]) for i in range(0, BLOCK_SIZE, 4)]


def state_to_bytes(state: State) -> bytes:
    """Read a state back out column by column."""
    return bytes(b for column in state for b in column)


def sub_bytes(state: State) -> State:
    """Substitute every byte of the state through the S-box."""
    return [[SBOX[b] for b in column] for column in state]


def shift_rows(state: State) -> State:
    """Rotate row r of the state left by r positions."""
    return [[state[(c + r) % 4][r] for r in range(4)] for c in range(4)]


def mix_columns(state: State) -> State:
    """Multiply each column by the fixed MixColumns matrix."""
    return [
        [
            reduce(xor, (gf_multiply(b, m) for b, m in zip(column, row)), 0)
            for row in MIX_COLUMN_MATRIX
        ]
        for column in state
    ]


def add_round_key(state: State, round_keys: Sequence[Sequence[int]], round_number: int) -> State:
    """XOR the state with the four key-schedule words of the given round."""
    if not 0 <= round_number <= ROUNDS:
        raise ValueError(f"round number must be between 0 and {ROUNDS}")
    keys = round_keys[4 * round_number:4 * round_number + 4]
    return [list(xor_words(column, word)) for column, word in zip(state, keys)]


def _rounds(plaintext: Iterable[int], round_keys: Sequence[Word]) -> Iterator[tuple[int, str, State]]:
    state = state_from_bytes(plaintext)
    yield 0, "Initial state", state
    state = add_round_key(state, round_keys, 0)
    yield 0, "AddRoundKey", state
    for round_number in range(1, ROUNDS + 1):
        state = sub_bytes(state)
        yield round_number, "SubBytes", state
        state = shift_rows(state)
        yield round_number, "ShiftRows", state
        if round_number < ROUNDS:
            state = mix_columns(state)
            yield round_number, "MixColumns", state
        state = add_round_key(state, round_keys, round_number)
        yield round_number, "AddRoundKey", state


def encryption_trace(plaintext: Iterable[int], key: Iterable[int]) -> Iterator[tuple[int, str, State]]:
    """Yield (round, stage, state) after every step of encrypting one block."""
    return _rounds(plaintext, expand_key(key))


def encrypt_block(plaintext: Iterable[int], key: Iterable[int]) -> bytes:
    """Encrypt one 16-byte block with a 16-byte key."""
    return AES128(key).encrypt(plaintext)


def format_state(state: State) -> str:
    """Render a state as four rows of hexadecimal bytes."""
    return "\n".join(
        " ".join(f"0x{column[r]:02x}" for column in state) for r in range(4)
    )


class AES128:
    """An AES-128 cipher with its key schedule computed once."""

    def __init__(self, key: Iterable[int]) -> None:
        self.round_keys = expand_key(key)

    def encrypt(self, block: Iterable[int]) -> bytes:
        """Encrypt one 16-byte block."""
        *_, (_, _, state) = _rounds(block, self.round_keys)
        return state_to_bytes(state)