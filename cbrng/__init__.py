"""Counter-based random number generators: Philox, ARS, a 128-bit value type and stream adapters."""

__version__ = "0.1.0"
__all__ = ["philox", "m128", "ars", "microurng", "gslrng", "pi"]