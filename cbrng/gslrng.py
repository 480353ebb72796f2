"""A conventional get/set/uniform generator wrapped around a counter-based RNG."""

from __future__ import annotations

from collections.abc import Callable, Sequence

_MASK32 = 0xFFFFFFFF


class GslCbrng:
    """Stateful generator drawing 32-bit values from successive counters.

    The counter starts at zero and is stepped before each block; the key's
    first word is the seed. Values from a block are handed out last word first.
    """

    def __init__(
        self,
        cbrng: Callable[[Sequence[int], Sequence[int]], Sequence[int]],
        name: str = "cbrng",
    ) -> None:
        self.cbrng = cbrng
        self.name = name
        self._ctr_size = cbrng.ctr_size
        self._key_size = cbrng.key_size
        self._word_mask = (1 << cbrng.width) - 1
        self.set(0)

    def set(self, seed: int) -> None:
        """Reseed: clear the counter and key and put the seed in the first key word."""
        self._ctr = [0] * self._ctr_size
        self._key = [0] * self._key_size
        self._key[0] = seed & self._word_mask
        self._block: list[int] = []

    def _step_counter(self) -> None:
        ctr = self._ctr
        mask = self._word_mask
        ctr[0] = (ctr[0] + 1) & mask
        # each word above the first is bumped whenever the word below reads zero
        for i in range(1, min(len(ctr), 4)):
            if ctr[i - 1] == 0:
                ctr[i] = (ctr[i] + 1) & mask

    def get(self) -> int:
        """The next value, in [0, 2**32 - 1]."""
        if not self._block:
            self._step_counter()
            self._block = list(self.cbrng(tuple(self._ctr), tuple(self._key)))
        return self._block.pop() & _MASK32

    def get_double(self) -> float:
        """The next value scaled into [0, 1)."""
        return self.get() / 4294967296.0

    uniform = get_double

    def copy(self) -> GslCbrng:
        """An independent generator with the same state."""
        other = GslCbrng.__new__(GslCbrng)
        other.cbrng = self.cbrng
        other.name = self.name
        other._ctr_size = self._ctr_size
        other._key_size = self._key_size
        other._word_mask = self._word_mask
        other._ctr = list(self._ctr)
        other._key = list(self._key)
        other._block = list(self._block)
        return other

    def min(self) -> int:
        """The smallest value get() returns."""
        return 0

    def max(self) -> int:
        """The largest value get() returns."""
        return _MASK32

    def __repr__(self) -> str:
        return f"GslCbrng({self.name!r})"