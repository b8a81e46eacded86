# classwork

A collection of small programming exercises together with an AES-128 block
cipher written from the round transformations up.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## AES-128

The `classwork.aes` package encrypts a single 16-byte block with a 16-byte key
in two ways.

### Conventional rounds: `classwork.aes.cipher`

- `expand_key(key)` returns the 44 words of the AES-128 key schedule.
- `state_from_bytes(data)` and `state_to_bytes(state)` convert between 16 bytes
  and a 4×4 state held as four columns of four byte values.
- `sub_bytes`, `shift_rows`, `mix_columns` and
  `add_round_key(state, round_keys, round_number)` are the round steps; each
  returns a new state. `add_round_key` raises `ValueError` for a round number
  outside 0–10.
- `gf_multiply(a, b)`, `rot_word`, `sub_word` and `xor_words` are the byte and
  word helpers.
- `encrypt_block(plaintext, key)` returns the ciphertext as `bytes`.
- `encryption_trace(plaintext, key)` yields `(round, stage, state)` after every
  step, and `format_state(state)` renders a state as four rows of hexadecimal
  bytes.
- `AES128(key)` expands the key once; its `encrypt(block)` method encrypts
  16-byte blocks.

Blocks and keys of any length other than 16 bytes raise `ValueError`.

### Lookup tables: `classwork.aes.ttable`

- `make_tables()` builds (and caches) four 256-entry tables that combine
  SubBytes and MixColumns into one lookup per byte.
- `table_rounds(plaintext, key)` yields `(round, state)` after each round.
- `encrypt_block_ttable(plaintext, key)` gives the same ciphertext as the
  conventional version.

```python
from classwork.aes.cipher import AES128, encrypt_block
from classwork.aes.ttable import encrypt_block_ttable

key = bytes(range(16))
block = bytes(16)

ciphertext = AES128(key).encrypt(block)
assert ciphertext == encrypt_block(block, key) == encrypt_block_ttable(block, key)
```

### Command line

```
classwork-aes
```

encrypts the standard example block with the standard example key and prints,
for each implementation, the plaintext, the key and the ciphertext. Options:

- `--key HEX` and `--plaintext HEX` — 32 hexadecimal digits each.
- `--method {conventional,ttable,both}` — which implementation to run
  (default `both`).
- `--trace` — also print the state after every step of the conventional rounds.

The same report is available from Python through
`classwork.aes.cli.render_report(plaintext, key, method)`, with `method` being
`"conventional"` or `"ttable"`; `format_bytes(data)` renders bytes as
space-separated hexadecimal.

### What it does not do

Only encryption of one block is provided. There is no decryption, no block
cipher mode (ECB, CBC, CTR, …), no padding, and no 192- or 256-bit keys. The
code is meant for study, not for protecting data.

## Exercises

The `classwork.exercises` package holds the exercises, one module per chapter:

- `chapter3` — arithmetic: temperature conversion, interest on deposits
  (`deposit_totals`, `five_year_deposits`, `compound_growth`,
  `repayment_months`), triangle area, quadratic roots, letter case and letter
  shifting, and circle, sphere and cylinder measures (`cylinder_measures`
  returning a `Measures`).
- `chapter4` — branching: ordering numbers (`ascending`), a step function,
  grade ranges, a small menu (`menu_action`), leap years, and quadratic solvers
  (`quadratic_real_roots`, and `solve_quadratic` returning a
  `QuadraticSolution`).
- `chapter5` — loops: sums, donation collection, primes, the Leibniz series for
  π, rabbit pairs, a four-letter Caesar shift, greatest common divisor and least
  common multiple, character classification (`classify_chars` returning
  `CharCounts`), factorial and fraction series, narcissistic and perfect
  numbers, the bouncing ball and the monkey's peaches.
- `chapter6` — arrays: Fibonacci numbers, bubble and selection sort, matrix
  transpose, maximum and diagonal sum, a diamond picture, word counting, the
  largest string, the sieve of Eratosthenes, sorted insertion and reversal.
- `chapter7` — functions and recursion: a star banner, `max4`, recursive ages
  and factorial, the towers of Hanoi, index of the maximum, averages, matrix
  maximum, highest common factor and least common multiple, quadratic roots
  (complex where needed), prime testing and square-matrix transpose.

Invalid input raises `ValueError` throughout.

```python
from classwork.exercises.chapter4 import is_leap_year
from classwork.exercises.chapter6 import bubble_sort
from classwork.exercises.chapter7 import hanoi

is_leap_year(2000)        # True
is_leap_year(1900)        # False
bubble_sort([3, 1, 2])    # [1, 2, 3]
hanoi(2, "A", "B", "C")   # [('A', 'B'), ('A', 'C'), ('B', 'C')]
```