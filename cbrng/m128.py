"""An immutable 128-bit value with two 64-bit lanes, as used by the AES-based generators."""

from __future__ import annotations

import re
from collections.abc import Sequence

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1

_HEX_BYTE = re.compile(r"\s*([0-9a-fA-F]{1,2})")


class M128:
    """A 128-bit unsigned value viewed as a low and a high 64-bit lane.

    Only equality is defined; ordering comparisons raise TypeError.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, M128):
            value = int(value)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"M128 needs an int, not {type(value).__name__}")
        if not 0 <= value <= _MASK128:
            raise ValueError(f"{value!r} does not fit in 128 bits")
        self._value = value

    @classmethod
    def from_u32(cls, words: Sequence[int]) -> M128:
        """Assemble from four 32-bit words, least significant first."""
        words = tuple(words)
        if len(words) != 4:
            raise ValueError(f"expected 4 words, got {len(words)}")
        value = 0
        for shift, word in zip((0, 32, 64, 96), words):
            if not 0 <= word <= _MASK32:
                raise ValueError(f"word {word!r} does not fit in 32 bits")
            value |= word << shift
        return cls(value)

    @classmethod
    def from_u64(cls, lo: int, hi: int = 0) -> M128:
        """Assemble from a low and a high 64-bit lane."""
        for lane in (lo, hi):
            if not 0 <= lane <= _MASK64:
                raise ValueError(f"lane {lane!r} does not fit in 64 bits")
        return cls(lo | (hi << 64))

    @classmethod
    def parse(cls, text: str) -> M128:
        """Parse the text form written by str(): the low and high lanes in decimal."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two decimal words, got {text!r}")
        try:
            lo, hi = (int(part, 10) for part in parts)
        except ValueError as exc:
            raise ValueError(f"expected two decimal words, got {text!r}") from exc
        return cls.from_u64(lo, hi)

    @property
    def lo(self) -> int:
        """The low 64-bit lane."""
        return self._value & _MASK64

    @property
    def hi(self) -> int:
        """The high 64-bit lane."""
        return self._value >> 64

    def u32_words(self) -> tuple[int, int, int, int]:
        """The four 32-bit words, least significant first."""
        v = self._value
        return (v & _MASK32, (v >> 32) & _MASK32, (v >> 64) & _MASK32, v >> 96)

    def incremented(self) -> M128:
        """The value plus one, carrying from the low lane into the high lane."""
        lo = (self.lo + 1) & _MASK64
        hi = self.hi
        if lo == 0:
            hi = (hi + 1) & _MASK64
        return M128.from_u64(lo, hi)

    def __add__(self, n: int) -> M128:
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        if not 0 <= n <= _MASK64:
            raise ValueError(f"increment {n!r} does not fit in 64 bits")
        lo = (self.lo + n) & _MASK64
        hi = self.hi
        if lo < n:
            hi = (hi + 1) & _MASK64
        return M128.from_u64(lo, hi)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, M128):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return 0 <= other <= _MASK64 and self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def _unordered(self, op: str) -> None:
        raise TypeError(f"operator {op} is not defined for M128")

    def __lt__(self, other: object) -> bool:
        self._unordered("<")
        return False

    def __le__(self, other: object) -> bool:
        self._unordered("<=")
        return False

    def __gt__(self, other: object) -> bool:
        self._unordered(">")
        return False

    def __ge__(self, other: object) -> bool:
        self._unordered(">=")
        return False

    def __str__(self) -> str:
        return f"{self.lo} {self.hi}"

    def __repr__(self) -> str:
        return f"M128(0x{self._value:032x})"


def m128_from_hex(text: str) -> M128:
    """Read sixteen hex bytes, byte 0 (least significant) first."""
    found = []
    pos = 0
    while len(found) < 16:
        match = _HEX_BYTE.match(text, pos)
        if match is None:
            raise ValueError(f"expected 16 hex bytes in {text!r}")
        found.append(int(match.group(1), 16))
        pos = match.end()
    return M128(int.from_bytes(bytes(found), "little"))


def m128_to_hex(value: M128 | int) -> str:
    """Write the sixteen bytes in memory order as two groups of eight hex bytes."""
    raw = int(value).to_bytes(16, "little")
    return f"{raw[:8].hex()} {raw[8:].hex()}"