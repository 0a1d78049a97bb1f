"""Transforms and spectral helpers that work on half of a spectrum.

:func:`half_hartley` computes only the odd-frequency bins of a real signal.
Bin ``k`` of its result holds ``sum x[j] cos(2*pi*j*(2k+1)/n)`` and
``sum x[j] sin(2*pi*j*(2k+1)/n)``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from radixconv.tables import Twiddle
from radixconv.transform import Bin, conv_final

__all__ = ["half_hartley", "half_hadamard", "half_conv_final", "half_conv_end"]

_R2 = math.sqrt(2) / 2


def _require_size(n: int, minimum: int) -> None:
    if not isinstance(n, int) or n < minimum or n & (n - 1):
        raise ValueError(f"size must be a power of two of at least {minimum}, got {n!r}")


def half_hartley(
    x: Sequence[float],
    indices: Sequence[int],
    table: Sequence[Twiddle],
    n: int,
) -> list[Bin]:
    """Return the ``n // 4`` odd-frequency bins (1, 3, 5, ...) of ``n`` real samples.

    ``indices`` is the bit-reversal order of size ``n`` and ``table`` the
    twiddles of size ``n``.
    """
    _require_size(n, 8)
    if len(indices) != n:
        raise ValueError(f"expected {n} indices, got {len(indices)}")
    if len(table) < n // 4:
        raise ValueError(f"twiddle table needs at least {n // 4} entries, got {len(table)}")
    if len(x) < n:
        raise ValueError(f"signal needs at least {n} samples, got {len(x)}")

    slots = n // 2
    re = [0.0] * slots
    im = [0.0] * slots

    for base in range(0, n, 8):
        p = indices[base : base + 8]
        a = x[p[0]] - x[p[1]]
        b = x[p[2]] - x[p[3]]
        c = x[p[4]] - x[p[5]]
        f = x[p[6]] - x[p[7]]
        slot = base // 2

        d = (c - f) * _R2
        re[slot] = a + d
        re[slot + 1] = a - d

        rot = (c + f) * _R2
        im[slot] = rot + b
        im[slot + 1] = rot - b

    size = 8
    step = n // size
    while size <= slots:
        half = size // 2
        for lo in range(0, slots, size):
            hi = lo + half
            for m in range(size // 4):
                t = table[step // 2 + m * step]
                ci, si = re[lo + m], im[lo + m]
                xr, xi = re[hi + m], im[hi + m]
                a = xr * t.c - xi * t.s
                b = xr * t.s + xi * t.c
                re[lo + m] = ci + a
                im[lo + m] = si + b
                re[hi - 1 - m] = ci - a
                im[hi - 1 - m] = -si + b
        size *= 2
        step //= 2

    return [Bin(c, s) for c, s in zip(re[: n // 4], im[: n // 4])]


def half_hadamard(w: Sequence[Bin], z: Sequence[Bin], half: int) -> list[float]:
    """Multiply two half spectra and return ``half`` Hartley values.

    Entry ``i`` and entry ``half - 1 - i`` come from bin ``i`` of both inputs.
    """
    if not isinstance(half, int) or half < 2 or half % 2:
        raise ValueError(f"half must be an even integer of at least 2, got {half!r}")
    bins = half // 2
    if len(w) < bins:
        raise ValueError(f"w needs at least {bins} bins, got {len(w)}")
    if len(z) < bins:
        raise ValueError(f"z needs at least {bins} bins, got {len(z)}")

    out = [0.0] * half
    for i, (wi, zi) in enumerate(zip(w[:bins], z[:bins])):
        v = wi.c + wi.s
        l = wi.c - wi.s
        out[i] = zi.c * v + zi.s * l
        out[half - 1 - i] = zi.c * l - zi.s * v
    return out


def half_conv_final(
    g: Sequence[float],
    spectrum: Sequence[Bin],
    table: Sequence[Twiddle],
    n: int,
) -> list[float]:
    """Subtract the twiddled spectrum, scaled by ``2/n``, from ``g``.

    With ``m = len(spectrum) - 1`` the result has ``2 * m`` entries: the bins
    are walked up from 0 to ``m`` and back down to 1, entry ``i`` using
    ``table[i]``.
    """
    if n == 0:
        raise ValueError("n must not be zero")
    if len(spectrum) < 2:
        raise ValueError(f"spectrum needs at least 2 bins, got {len(spectrum)}")
    last = len(spectrum) - 1
    length = 2 * last
    if len(g) < length:
        raise ValueError(f"g needs at least {length} entries, got {len(g)}")
    if len(table) < length:
        raise ValueError(f"twiddle table needs at least {length} entries, got {len(table)}")

    out = [0.0] * length
    out[0] = g[0] - 2 * spectrum[0].c / n
    for i in range(1, last):
        t, b = table[i], spectrum[i]
        out[i] = g[i] - 2 * (t.cas * b.c + t.cas_star * b.s) / n
    out[last] = g[last] - 2 * spectrum[last].c / n
    for j in range(1, last):
        i = last + j
        t, b = table[i], spectrum[last - j]
        out[i] = g[i] - 2 * (t.cas * b.c - t.cas_star * b.s) / n
    return out


def half_conv_end(z: Sequence[float], spectrum: Sequence[Bin], n: int) -> list[float]:
    """Return the inverse of ``spectrum`` (scaled by ``1/n``) minus ``z``."""
    if len(z) < n:
        raise ValueError(f"z needs at least {n} entries, got {len(z)}")
    return [value - zi for value, zi in zip(conv_final(spectrum, n), z)]