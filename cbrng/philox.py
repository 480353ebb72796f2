"""Philox counter-based random number generators (Product HI LO Xor)."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_ROUNDS = 10
MAX_ROUNDS = 16

_MULTIPLIERS = {
    (2, 32): (0xD256D193,),
    (4, 32): (0xD2511F53, 0xCD9E8D57),
    (2, 64): (0xD2B74407B1CE6E93,),
    (4, 64): (0xD2E7470EE14C6C93, 0xCA5A826395121157),
}

_WEYL = {
    32: (0x9E3779B9, 0xBB67AE85),
    64: (0x9E3779B97F4A7C15, 0xBB67AE8584CAA73B),
}


def _check_shape(n: int, width: int) -> None:
    if n not in (2, 4):
        raise ValueError(f"philox supports 2 or 4 words, not {n}")
    if width not in (32, 64):
        raise ValueError(f"philox supports 32- or 64-bit words, not {width}")


def _check_words(name: str, words: Sequence[int], count: int, width: int) -> tuple[int, ...]:
    words = tuple(words)
    if len(words) != count:
        raise ValueError(f"{name} must have {count} words, got {len(words)}")
    limit = 1 << width
    for word in words:
        if not 0 <= word < limit:
            raise ValueError(f"{name} word {word!r} does not fit in {width} bits")
    return words


def mulhilo(a: int, b: int, width: int) -> tuple[int, int]:
    """Return (hi, lo): the high and low halves of the 2*width-bit product a*b."""
    if width <= 0:
        raise ValueError("width must be positive")
    mask = (1 << width) - 1
    product = (a & mask) * (b & mask)
    return product >> width, product & mask


def _round(ctr: tuple[int, ...], key: tuple[int, ...], width: int) -> tuple[int, ...]:
    if len(ctr) == 2:
        (m0,) = _MULTIPLIERS[(2, width)]
        hi, lo = mulhilo(m0, ctr[0], width)
        return (hi ^ key[0] ^ ctr[1], lo)
    m0, m1 = _MULTIPLIERS[(4, width)]
    hi0, lo0 = mulhilo(m0, ctr[0], width)
    hi1, lo1 = mulhilo(m1, ctr[2], width)
    return (hi1 ^ ctr[1] ^ key[0], lo1, hi0 ^ ctr[3] ^ key[1], lo0)


def _bump_key(key: tuple[int, ...], width: int) -> tuple[int, ...]:
    mask = (1 << width) - 1
    return tuple((k + w) & mask for k, w in zip(key, _WEYL[width]))


def philox(
    n: int,
    width: int,
    ctr: Sequence[int],
    key: Sequence[int],
    rounds: int = DEFAULT_ROUNDS,
) -> tuple[int, ...]:
    """Apply the PhiloxNxW bijection with the given number of rounds."""
    _check_shape(n, width)
    if not 0 <= rounds <= MAX_ROUNDS:
        raise ValueError(f"philox rounds must be between 0 and {MAX_ROUNDS}, not {rounds}")
    state = _check_words("counter", ctr, n, width)
    k = _check_words("key", key, n // 2, width)
    for i in range(rounds):
        if i:
            k = _bump_key(k, width)
        state = _round(state, k, width)
    return state


def philox2x32(ctr: Sequence[int], key: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> tuple[int, ...]:
    """Philox2x32: two 32-bit counter words, one 32-bit key word."""
    return philox(2, 32, ctr, key, rounds)


def philox4x32(ctr: Sequence[int], key: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> tuple[int, ...]:
    """Philox4x32: four 32-bit counter words, two 32-bit key words."""
    return philox(4, 32, ctr, key, rounds)


def philox2x64(ctr: Sequence[int], key: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> tuple[int, ...]:
    """Philox2x64: two 64-bit counter words, one 64-bit key word."""
    return philox(2, 64, ctr, key, rounds)


def philox4x64(ctr: Sequence[int], key: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> tuple[int, ...]:
    """Philox4x64: four 64-bit counter words, two 64-bit key words."""
    return philox(4, 64, ctr, key, rounds)


class Philox:
    """A PhiloxNxW generator with a fixed number of rounds, callable as f(ctr, key)."""

    def __init__(self, n: int = 4, width: int = 32, rounds: int = DEFAULT_ROUNDS) -> None:
        _check_shape(n, width)
        if not 0 <= rounds <= MAX_ROUNDS:
            raise ValueError(f"philox is only unrolled up to {MAX_ROUNDS} rounds")
        self.n = n
        self.width = width
        self.rounds = rounds

    @property
    def ctr_size(self) -> int:
        """Number of words in a counter."""
        return self.n

    @property
    def key_size(self) -> int:
        """Number of words in a key."""
        return self.n // 2

    def __call__(self, ctr: Sequence[int], key: Sequence[int]) -> tuple[int, ...]:
        return philox(self.n, self.width, ctr, key, self.rounds)

    def __repr__(self) -> str:
        return f"Philox{self.n}x{self.width}_R<{self.rounds}>"