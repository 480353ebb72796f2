"""MicroURNG: a conventional uniform random number generator built on one counter."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

BITS = 32


class MicroURNG:
    """Turn a counter-based RNG and a (counter, key) pair into a stream of words.

    The high 32 bits of the last counter word are reserved: the generator
    places its own block number there, so the given counter must leave them
    clear. The stream has a period of ``len(counter) * 2**32`` words, after
    which it silently repeats.
    """

    def __init__(
        self,
        cbrng: Callable[[Sequence[int], Sequence[int]], Sequence[int]],
        counter: Sequence[int],
        key: Sequence[int],
    ) -> None:
        width = getattr(cbrng, "width", None)
        if not isinstance(width, int) or width < BITS:
            raise TypeError("MicroURNG needs a generator whose words have at least 32 bits")
        self._cbrng = cbrng
        self._width = width
        self._word_mask = (1 << width) - 1
        self.reset(counter, key)

    def _check_high_bits(self, counter: tuple[int, ...]) -> None:
        if not counter:
            raise ValueError("MicroURNG: the counter must have at least one word")
        last = counter[-1]
        allowed = self._word_mask >> BITS
        if last & allowed != last:
            raise ValueError("MicroURNG: counter does not have its high bits clear")

    def reset(self, counter: Sequence[int], key: Sequence[int]) -> None:
        """Start a fresh stream from a new counter and key."""
        c0 = tuple(counter)
        self._check_high_bits(c0)
        self._c0 = c0
        self._key = tuple(key)
        self._block = 0
        self._pending: list[int] = []

    def counter(self) -> tuple[int, ...]:
        """The counter the stream was started from."""
        return self._c0

    def __call__(self) -> int:
        if not self._pending:
            shifted = (self._block << (self._width - BITS)) & self._word_mask
            ctr = (*self._c0[:-1], self._c0[-1] | shifted)
            self._pending = list(self._cbrng(ctr, self._key))
            self._block += 1
        return self._pending.pop()

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self()

    def min(self) -> int:
        """The smallest value the generator can return."""
        return 0

    def max(self) -> int:
        """The largest value the generator can return."""
        return self._word_mask

    def __repr__(self) -> str:
        return f"MicroURNG({self._cbrng!r}, counter={self._c0!r})"