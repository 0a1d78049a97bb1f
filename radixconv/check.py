"""Check the radix transform against a direct evaluation of its sums."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from radixconv.tables import Twiddle, bit_reversal, random_signal, twiddles
from radixconv.transform import Bin, hartley

__all__ = ["direct_spectrum", "count_matches", "main"]

_TOLERANCE = 1e-10


def _table_step(table: Sequence[Twiddle], n: int) -> int:
    if not isinstance(n, int) or n < 1 or n & (n - 1):
        raise ValueError(f"size must be a positive power of two, got {n!r}")
    if len(table) < n or len(table) % n:
        raise ValueError(f"twiddle table of {len(table)} entries does not fit size {n}")
    return len(table) // n


def direct_spectrum(x: Sequence[float], table: Sequence[Twiddle], n: int) -> list[Bin]:
    """Return bins ``0..n//2`` of ``x[:n]`` computed by direct summation."""
    step = _table_step(table, n)
    if len(x) < n:
        raise ValueError(f"signal needs at least {n} samples, got {len(x)}")
    result = []
    for i in range(n // 2 + 1):
        c = s = 0.0
        for j, value in enumerate(x[:n]):
            t = table[(j * i) % n * step]
            c += value * t.c
            s += value * t.s
        result.append(Bin(c, s))
    return result


def count_matches(
    x: Sequence[float],
    spectrum: Sequence[Bin],
    table: Sequence[Twiddle],
    n: int,
    tolerance: float = _TOLERANCE,
) -> int:
    """Count the bins of ``spectrum`` within ``tolerance`` of the direct sums."""
    reference = direct_spectrum(x, table, n)
    if len(spectrum) < len(reference):
        raise ValueError(f"spectrum needs at least {len(reference)} bins, got {len(spectrum)}")
    return sum(
        abs(want.c - got.c) < tolerance and abs(want.s - got.s) < tolerance
        for want, got in zip(reference, spectrum)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Transform a random signal and report how many bins match the direct sums."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--size", type=int, default=512, help="signal length")
    parser.add_argument("--table-size", type=int, default=1024, help="twiddle table size")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--tolerance", type=float, default=_TOLERANCE)
    args = parser.parse_args(argv)

    n, total = args.size, args.table_size
    if n < 1 or total < n or total % n:
        parser.error("table size must be a positive multiple of the signal size")
    try:
        table = twiddles(total)
        indices = bit_reversal(total)
        x = random_signal(n, random.Random(args.seed))
        spectrum = hartley(x, indices, table, n, total // n, sparse=False)
        matches = count_matches(x, spectrum, table, n, args.tolerance)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Matches: {matches} ({n // 2 + 1})")
    return 0