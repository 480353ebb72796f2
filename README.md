# cbrng

Counter-based random number generators in pure Python, with no dependencies
outside the standard library.

A counter-based generator is a keyed bijection: given a counter and a key it
returns a block of random words. The same counter and key always give the same
block, so streams can be split, skipped ahead and reproduced without storing
state.

## Modules

- `cbrng.philox` — the Philox family: `philox2x32`, `philox4x32`,
  `philox2x64`, `philox4x64`, the general `philox(n, width, ctr, key, rounds)`
  and the callable class `Philox(n=4, width=32, rounds=10)`. Rounds default
  to 10 and may be 0 to 16. `mulhilo(a, b, width)` returns the high and low
  halves of a full-width product. Counters and keys are sequences of ints;
  results are tuples of ints. Wrong lengths, out-of-range words or rounds
  raise `ValueError`.
- `cbrng.ars` — ARS, built on the AES round function with a Weyl-sequence
  key schedule (fast, not cryptographic): `ars1xm128i` on one 128-bit value,
  `ars4x32` on four 32-bit words (least significant first), the callable
  classes `ARS1xm128i` and `ARS4x32`, and the round functions `aesenc` and
  `aesenclast`. Rounds default to 7 and may be 0 to 10.
- `cbrng.m128` — `M128`, an immutable 128-bit value seen as a low and a high
  64-bit lane. It supports `incremented()`, `+` with a 64-bit int (carrying
  into the high lane), equality with `M128` or ints, `from_u32`, `from_u64`,
  `u32_words()`, and a text form `str(m)` = `"<lo> <hi>"` in decimal that
  `M128.parse` reads back. Ordering comparisons raise `TypeError`.
  `m128_from_hex` and `m128_to_hex` read and write sixteen hex bytes, byte 0
  first.
- `cbrng.microurng` — `MicroURNG(cbrng, counter, key)`, which turns one
  counter and key into a stream of words. Calling it returns the next word;
  iterating it yields words without end. The high 32 bits of the last counter
  word must be clear (the generator counts blocks there), otherwise
  `ValueError` is raised. The generator must have a `width` of at least 32
  bits (`Philox` and `ARS4x32` do). `reset`, `counter`, `min` and `max` are
  also provided.
- `cbrng.gslrng` — `GslCbrng(cbrng, name="cbrng")`, a conventional seeded
  generator. `get()` returns values in `[min(), max()]` = `[0, 2**32 - 1]`,
  `get_double()` (also `uniform()`) returns a float in `[0, 1)`,
  `set(seed)` reseeds (seed 0 restores the initial state) and `copy()`
  returns an independent generator with the same state. It needs a generator
  with `ctr_size`, `key_size` and `width`, such as `Philox` or `ARS4x32`.
- `cbrng.pi` — a Monte Carlo estimate of pi: `count_hits(urng, tries)`,
  `estimate_pi(tries)` and the command-line entry point `main`.

## Installation

```
pip install .
```

## Examples

```python
from cbrng.philox import philox4x32, Philox

block = philox4x32([0, 0, 0, 0], [0, 0])       # four 32-bit words, 10 rounds

gen = Philox(4, 32, 10)
block = gen([1, 2, 3, 4], [5, 6])
```

A sequential stream from a single counter:

```python
from cbrng.philox import Philox
from cbrng.microurng import MicroURNG

urng = MicroURNG(Philox(4, 32, 10), [1, 0, 0, 0], [0, 0])
values = [urng() for _ in range(10)]
```

A conventional seeded generator:

```python
from cbrng.philox import Philox
from cbrng.gslrng import GslCbrng

rng = GslCbrng(Philox(4, 64, 10), "cbrng")
rng.set(0xDEADBEEF)
x = rng.get()          # integer in [rng.min(), rng.max()]
u = rng.get_double()   # float in [0, 1)
```

ARS on a 128-bit value:

```python
from cbrng.ars import ars1xm128i
from cbrng.m128 import m128_from_hex, m128_to_hex

c = m128_from_hex("01 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00")
print(m128_to_hex(ars1xm128i(c, c, 7)))
```

## Command line

Estimate pi by throwing darts at the square [-1, 1]², using one `MicroURNG`
over Philox4x32 (default 100000 tries):

```
cbrng-pi
cbrng-pi 500000
```

## What is not included

The generators are plain Python integer arithmetic: there is no hardware
acceleration, no vectorised or GPU execution, and throughput is far below
that of native code. Only the Philox and ARS families are provided; there are
no Threefry or full-AES generators, and no distribution functions beyond the
uniform values of `GslCbrng` and the pi example.

## Running the tests

```
pip install .[test]
pytest
```