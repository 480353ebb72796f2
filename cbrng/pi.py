"""Estimate pi by throwing darts with a MicroURNG over Philox4x32."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Callable, Sequence

from cbrng.microurng import MicroURNG
from cbrng.philox import Philox

DEFAULT_TRIES = 100_000

_F32 = struct.Struct("f")


def _f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


def count_hits(urng: Callable[[], int], tries: int) -> int:
    """Count how many of `tries` points in [-1, 1]^2 fall inside the unit circle."""
    if tries < 0:
        raise ValueError("tries must not be negative")
    scale = float(urng.max())
    hits = 0
    for _ in range(tries):
        x = _f32(2.0 * urng() / scale - 1.0)
        y = _f32(2.0 * urng() / scale - 1.0)
        if _f32(_f32(x * x) + _f32(y * y)) < 1.0:
            hits += 1
    return hits


def estimate_pi(tries: int = DEFAULT_TRIES) -> float:
    """Estimate pi from `tries` darts drawn from one MicroURNG."""
    if tries <= 0:
        raise ValueError("tries must be positive")
    urng = MicroURNG(Philox(4, 32), (1, 0, 0, 0), (0, 0))
    return 4.0 * count_hits(urng, tries) / tries


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate pi with a counter-based RNG.")
    parser.add_argument("tries", nargs="?", type=int, default=DEFAULT_TRIES)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.tries <= 0:
        parser.error("tries must be positive")
    print(f"Calling a single MicroURNG {args.tries} times")
    print(f"pi is approximately {estimate_pi(args.tries):.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())