"""Radix-2 real transform with split-radix 8-point leaves, and spectral helpers.

A spectrum is a list of ``n // 2 + 1`` :class:`Bin` values, where bin ``k``
holds ``sum x[j] cos(2*pi*j*k/n)`` and ``sum x[j] sin(2*pi*j*k/n)``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from radixconv.tables import Twiddle

__all__ = ["Bin", "hartley", "hadamard", "hadamard_cross", "conv_final", "add_hartley"]

_R2 = math.sqrt(2) / 2


@dataclass(frozen=True)
class Bin:
    """Cosine and sine sums of one frequency bin."""

    c: float
    s: float


def _require_size(n: int, minimum: int) -> None:
    if not isinstance(n, int) or n < minimum or n & (n - 1):
        raise ValueError(f"size must be a power of two of at least {minimum}, got {n!r}")


def _require_bins(spectrum: Sequence[Bin], n: int, name: str) -> None:
    if len(spectrum) < n // 2 + 1:
        raise ValueError(f"{name} needs at least {n // 2 + 1} bins, got {len(spectrum)}")


def _leaf_dense(x: Sequence[float], p: Sequence[int]) -> tuple[list[float], list[float]]:
    x0, x1, x2, x3 = x[p[0]], x[p[1]], x[p[2]], x[p[3]]
    x4, x5, x6, x7 = x[p[4]], x[p[5]], x[p[6]], x[p[7]]

    a = x4 + x7
    b = x6 + x5
    c = x2 + x3
    d = x0 + x1
    f = x0 - x1
    c2 = d - c
    even = c + d
    rot = (a - b) * _R2
    c1 = f + rot
    c3 = f - rot
    total = a + b
    c0 = even + total
    c4 = even - total

    a = x4 - x7
    b = x6 - x5
    c = x2 - x3
    s2 = a - b
    rot = (a + b) * _R2
    s1 = rot + c
    s3 = rot - c
    return [c0, c1, c2, c3, c4], [0.0, s1, s2, s3, 0.0]


def _leaf_sparse(x: Sequence[float], p: Sequence[int]) -> tuple[list[float], list[float]]:
    a = x[p[4]]
    b = x[p[6]]
    c = x[p[2]]
    d = x[p[0]]

    c2 = d - c
    even = c + d
    g = a - b
    f = g * _R2
    c1 = d + f
    c3 = d - f
    f = a + b
    c0 = even + f
    c4 = even - f

    s2 = g
    f *= _R2
    s1 = f + c
    s3 = f - c
    return [c0, c1, c2, c3, c4], [0.0, s1, s2, s3, 0.0]


def hartley(
    x: Sequence[float],
    indices: Sequence[int],
    table: Sequence[Twiddle],
    n: int,
    stride: int = 1,
    sparse: bool = False,
) -> list[Bin]:
    """Transform ``n`` real samples into ``n // 2 + 1`` cosine/sine bins.

    ``indices`` is the bit-reversal order of a table of size ``n * stride`` and
    ``table`` the twiddles of that size. With ``sparse`` set, the upper half of
    the signal is taken as zero and only ``x[:n // 2]`` is read.
    """
    _require_size(n, 8)
    if not isinstance(stride, int) or stride < 1:
        raise ValueError(f"stride must be a positive integer, got {stride!r}")
    total = n * stride
    if len(indices) != total:
        raise ValueError(f"expected {total} indices, got {len(indices)}")
    if len(table) < total // 4:
        raise ValueError(f"twiddle table needs at least {total // 4} entries, got {len(table)}")
    needed = n // 2 if sparse else n
    if len(x) < needed:
        raise ValueError(f"signal needs at least {needed} samples, got {len(x)}")

    re = [0.0] * n
    im = [0.0] * n
    picks = indices[::stride]
    leaf = _leaf_sparse if sparse else _leaf_dense
    for base in range(0, n, 8):
        cos_part, sin_part = leaf(x, picks[base : base + 8])
        re[base : base + 5] = cos_part
        im[base : base + 5] = sin_part

    size = 16
    step = total // size
    while size <= n:
        half = size // 2
        quarter = size // 4
        for lo in range(0, n, size):
            hi = lo + half

            a, b = re[hi], im[hi]
            re[hi] = re[lo] - a
            im[hi] = -im[lo] + b
            re[lo] += a
            im[lo] += b

            for k in range(1, quarter):
                t = table[k * step]
                ci, si = re[lo + k], im[lo + k]
                xr, xi = re[hi + k], im[hi + k]
                a = xr * t.c - xi * t.s
                b = xr * t.s + xi * t.c
                re[lo + k] = ci + a
                im[lo + k] = si + b
                re[hi - k] = ci - a
                im[hi - k] = -si + b

            ci, si = re[lo + quarter], im[lo + quarter]
            re[lo + quarter] = ci - im[hi + quarter]
            im[lo + quarter] = si + re[hi + quarter]
        size *= 2
        step //= 2

    return [Bin(c, s) for c, s in zip(re[: n // 2 + 1], im[: n // 2 + 1])]


def _combine(w: Sequence[Bin], z: Sequence[Bin], n: int, cross: bool) -> list[float]:
    _require_size(n, 2)
    _require_bins(w, n, "w")
    _require_bins(z, n, "z")
    half = n // 2
    out = [0.0] * n
    out[0] = w[0].c * z[0].c
    for i in range(1, half):
        wi, zi = w[i], z[i]
        if cross:
            a = wi.c * zi.c + wi.s * zi.s
            b = wi.c * zi.s - wi.s * zi.c
        else:
            a = wi.c * zi.c - wi.s * zi.s
            b = wi.c * zi.s + wi.s * zi.c
        out[i] = a + b
        out[n - i] = a - b
    out[half] = w[half].c * z[half].c
    return out


def hadamard(w: Sequence[Bin], z: Sequence[Bin], n: int) -> list[float]:
    """Multiply two spectra and return the Hartley values of the circular convolution."""
    return _combine(w, z, n, cross=False)


def hadamard_cross(w: Sequence[Bin], z: Sequence[Bin], n: int) -> list[float]:
    """Multiply ``conj(w)`` by ``z``; the Hartley values of the circular cross-correlation."""
    return _combine(w, z, n, cross=True)


def conv_final(z: Sequence[Bin], n: int) -> list[float]:
    """Turn the spectrum of a Hartley-valued array back into ``n`` samples, scaled by ``1/n``."""
    _require_size(n, 2)
    _require_bins(z, n, "z")
    half = n // 2
    out = [0.0] * n
    out[0] = z[0].c / n
    for i in range(1, half):
        out[i] = (z[i].c + z[i].s) / n
        out[n - i] = (z[i].c - z[i].s) / n
    out[half] = z[half].c / n
    return out


def add_hartley(a: Sequence[float], w: Sequence[Bin], half: int) -> list[float]:
    """Return ``a`` with the cas values of bins ``0..half`` of ``w`` added to its first entries."""
    if half < 1:
        raise ValueError(f"half must be at least 1, got {half!r}")
    if len(w) < half + 1:
        raise ValueError(f"w needs at least {half + 1} bins, got {len(w)}")
    if len(a) < half + 1:
        raise ValueError(f"a needs at least {half + 1} entries, got {len(a)}")
    result = list(a)
    result[0] += w[0].c
    result[half] += w[half].c
    for k in range(1, half):
        result[k] += w[k].c + w[k].s
    return result