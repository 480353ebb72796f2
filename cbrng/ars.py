"""ARS: the AES round function with a Weyl-sequence key schedule. Fast, not cryptographic."""

from __future__ import annotations

from collections.abc import Sequence

from cbrng.m128 import M128

DEFAULT_ROUNDS = 7
MAX_ROUNDS = 10

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

# golden ratio in the low lane, sqrt(3) - 1 in the high lane
_KWEYL = M128.from_u64(0x9E3779B97F4A7C15, 0xBB67AE8584CAA73B)


def _rotl8(x: int, shift: int) -> int:
    return ((x << shift) | (x >> (8 - shift))) & 0xFF


def _build_sbox() -> tuple[int, ...]:
    sbox = [0] * 256
    p = q = 1
    while True:
        p = (p ^ (p << 1) ^ (0x1B if p & 0x80 else 0)) & 0xFF
        q ^= q << 1
        q ^= q << 2
        q ^= q << 4
        q &= 0xFF
        if q & 0x80:
            q ^= 0x09
        x = q ^ _rotl8(q, 1) ^ _rotl8(q, 2) ^ _rotl8(q, 3) ^ _rotl8(q, 4)
        sbox[p] = x ^ 0x63
        if p == 1:
            break
    sbox[0] = 0x63
    return tuple(sbox)


_SBOX = _build_sbox()


def _xtime(a: int) -> int:
    return ((a << 1) ^ (0x1B if a & 0x80 else 0)) & 0xFF


def _mix_column(a0: int, a1: int, a2: int, a3: int) -> tuple[int, int, int, int]:
    t = a0 ^ a1 ^ a2 ^ a3
    return (
        a0 ^ t ^ _xtime(a0 ^ a1),
        a1 ^ t ^ _xtime(a1 ^ a2),
        a2 ^ t ^ _xtime(a2 ^ a3),
        a3 ^ t ^ _xtime(a3 ^ a0),
    )


def _shift_sub(state: M128 | int) -> list[int]:
    raw = int(state).to_bytes(16, "little")
    # byte index r + 4*c holds row r of column c
    return [_SBOX[raw[r + 4 * ((c + r) % 4)]] for c in range(4) for r in range(4)]


def _as_m128(value: M128 | int) -> M128:
    return value if isinstance(value, M128) else M128(value)


def aesenc(state: M128 | int, round_key: M128 | int) -> M128:
    """One AES encryption round: ShiftRows, SubBytes, MixColumns, then xor the round key."""
    sub = _shift_sub(_as_m128(state))
    mixed = bytearray()
    for col in (sub[0:4], sub[4:8], sub[8:12], sub[12:16]):
        mixed.extend(_mix_column(*col))
    return M128(int.from_bytes(bytes(mixed), "little") ^ int(_as_m128(round_key)))


def aesenclast(state: M128 | int, round_key: M128 | int) -> M128:
    """The final AES round: ShiftRows, SubBytes, then xor the round key."""
    sub = _shift_sub(_as_m128(state))
    return M128(int.from_bytes(bytes(sub), "little") ^ int(_as_m128(round_key)))


def _add_epi64(a: M128, b: M128) -> M128:
    return M128.from_u64((a.lo + b.lo) & _MASK64, (a.hi + b.hi) & _MASK64)


def _check_rounds(rounds: int) -> None:
    if not 0 <= rounds <= MAX_ROUNDS:
        raise ValueError(f"ARS rounds must be between 0 and {MAX_ROUNDS}, not {rounds}")


def ars1xm128i(ctr: M128 | int, key: M128 | int, rounds: int = DEFAULT_ROUNDS) -> M128:
    """Apply the ARS bijection to one 128-bit counter under one 128-bit key."""
    _check_rounds(rounds)
    kk = _as_m128(key)
    v = M128(int(_as_m128(ctr)) ^ int(kk))
    for _ in range(1, rounds):
        kk = _add_epi64(kk, _KWEYL)
        v = aesenc(v, kk)
    kk = _add_epi64(kk, _KWEYL)
    return aesenclast(v, kk)


def _words4x32(name: str, words: Sequence[int]) -> tuple[int, ...]:
    words = tuple(words)
    if len(words) != 4:
        raise ValueError(f"{name} must have 4 words, got {len(words)}")
    for word in words:
        if not 0 <= word <= _MASK32:
            raise ValueError(f"{name} word {word!r} does not fit in 32 bits")
    return words


def ars4x32(ctr: Sequence[int], key: Sequence[int], rounds: int = DEFAULT_ROUNDS) -> tuple[int, ...]:
    """ARS over four 32-bit counter words and four 32-bit key words, least significant first."""
    c = M128.from_u32(_words4x32("counter", ctr))
    k = M128.from_u32(_words4x32("key", key))
    return ars1xm128i(c, k, rounds).u32_words()


class ARS1xm128i:
    """ARS on a single 128-bit word with a fixed number of rounds, callable as f(ctr, key)."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        _check_rounds(rounds)
        self.rounds = rounds

    def __call__(self, ctr: M128 | int, key: M128 | int) -> M128:
        return ars1xm128i(ctr, key, self.rounds)

    def __repr__(self) -> str:
        return f"ARS1xm128i_R<{self.rounds}>"


class ARS4x32:
    """ARS on four 32-bit words with a fixed number of rounds, callable as f(ctr, key)."""

    ctr_size = 4
    key_size = 4
    width = 32

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        _check_rounds(rounds)
        self.rounds = rounds

    def __call__(self, ctr: Sequence[int], key: Sequence[int]) -> tuple[int, ...]:
        return ars4x32(ctr, key, self.rounds)

    def __repr__(self) -> str:
        return f"ARS4x32_R<{self.rounds}>"