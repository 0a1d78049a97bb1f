"""Lookup tables shared by the radix transforms: bit-reversal order and twiddles."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

__all__ = ["Twiddle", "bit_reversal", "twiddles", "rand_unit", "random_signal"]

_SIGNAL_SCALE = 0.02


def _require_power_of_two(n: int) -> None:
    if not isinstance(n, int) or n < 1 or n & (n - 1):
        raise ValueError(f"size must be a positive power of two, got {n!r}")


@dataclass(frozen=True)
class Twiddle:
    """Cosine and sine of one root-of-unity angle."""

    c: float
    s: float

    @property
    def cas(self) -> float:
        """cas(x) = cos(x) + sin(x)."""
        return self.c + self.s

    @property
    def cas_star(self) -> float:
        """cas*(x) = cos(x) - sin(x)."""
        return self.c - self.s


def bit_reversal(n: int) -> list[int]:
    """Return the bit-reversed ordering of ``range(n)``; ``n`` a power of two."""
    _require_power_of_two(n)
    order = [0]
    step = n // 2
    while len(order) < n:
        order += [i + step for i in order]
        step //= 2
    return order


def twiddles(n: int) -> list[Twiddle]:
    """Return the twiddles for the angles ``2*pi*i/n``, ``i`` in ``range(n)``."""
    _require_power_of_two(n)
    result = []
    for i in range(n):
        angle = 2 * math.pi * i / n
        result.append(Twiddle(math.cos(angle), math.sin(angle)))
    return result


def rand_unit(rng: random.Random | None = None) -> float:
    """Return a uniform random number in [-1, 1)."""
    rng = rng if rng is not None else random.Random()
    return 2 * rng.random() - 1


def random_signal(n: int, rng: random.Random | None = None) -> list[float]:
    """Return ``n`` small random samples in [-0.02, 0.02)."""
    if n < 0:
        raise ValueError(f"signal length must not be negative, got {n!r}")
    rng = rng if rng is not None else random.Random()
    return [rand_unit(rng) * _SIGNAL_SCALE for _ in range(n)]