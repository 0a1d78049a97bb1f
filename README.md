# radixconv

Radix-2 fast transforms of real signals in pure Python. The package also
has the spectral products and inverse step needed to do circular
convolution and cross-correlation in the frequency domain.

## Modules

- `radixconv.tables`
  - `bit_reversal(n)` returns the bit-reversed ordering of `range(n)`.
  - `twiddles(n)` returns one `Twiddle` per angle `2*pi*i/n`.
  - `Twiddle` holds `c` and `s` and has the properties `cas` (`c + s`)
    and `cas_star` (`c - s`).
  - `rand_unit(rng)` returns a uniform number in [-1, 1).
  - `random_signal(n, rng)` returns `n` samples in [-0.02, 0.02).

  Sizes must be positive powers of two. If they are not, a `ValueError`
  is raised.
- `radixconv.transform`
  - `hartley(x, indices, table, n, stride=1, sparse=False)` returns the
    `n // 2 + 1` bins of `n` real samples. Each bin is a `Bin` with
    `c = sum x[j] cos(2*pi*j*k/n)` and `s = sum x[j] sin(2*pi*j*k/n)`.
    `n` must be a power of two of at least 8. With `sparse=True`, only
    `x[:n // 2]` is read and the upper half is taken as zero.
  - `hadamard(w, z, n)` multiplies two spectra. It returns the `n`
    Hartley values of the circular convolution.
  - `hadamard_cross(w, z, n)` does the same with `w` conjugated, which
    gives the circular cross-correlation.
  - `conv_final(z, n)` turns the spectrum of a Hartley-valued array back
    into `n` samples, scaled by `1/n`.
  - `add_hartley(a, w, half)` returns a copy of `a` with the cas values
    of bins `0..half` of `w` added to its first entries.
- `radixconv.half`
  - `half_hartley(x, indices, table, n)` returns only the `n // 4`
    odd-frequency bins (1, 3, 5, ...).
  - `half_hadamard(w, z, half)` multiplies two half spectra into `half`
    values.
  - `half_conv_final(g, spectrum, table, n)` subtracts the twiddled
    spectrum, scaled by `2/n`, from `g`.
  - `half_conv_end(z, spectrum, n)` returns the inverse of `spectrum`
    minus `z`.
- `radixconv.check`
  - `direct_spectrum(x, table, n)` computes the bins by direct
    summation.
  - `count_matches(x, spectrum, table, n, tolerance=1e-10)` counts how
    many bins of `spectrum` agree with those direct sums.
  - `main(argv=None)` is the command-line self-check.

## Usage

Build the tables once, for the largest size you need. A smaller
transform then walks through them with a stride of `size // n`:

```python
import random

from radixconv.tables import bit_reversal, twiddles, random_signal
from radixconv.transform import hartley
from radixconv.check import count_matches

size = 1024
n = 512
indices = bit_reversal(size)
table = twiddles(size)

x = random_signal(n, random.Random(1))
spectrum = hartley(x, indices, table, n, size // n, False)
print(count_matches(x, spectrum, table, n, 1e-10), "of", n // 2 + 1)
```

To get the circular convolution of two signals of length `n`:

1. Transform both signals with `hartley`.
2. Combine the two spectra with `hadamard`.
3. Transform the result again with `hartley`.
4. Finish with `conv_final`.

```python
from radixconv.transform import hadamard, conv_final

y = random_signal(n, random.Random(2))
w = hartley(x, indices, table, n, size // n)
z = hartley(y, indices, table, n, size // n)
values = hadamard(w, z, n)
result = conv_final(hartley(values, indices, table, n, size // n), n)
```

For cross-correlation, use `hadamard_cross` in place of `hadamard`.

## Self-check

```
radixconv-check
```

This transforms a random 512-sample signal, using a 1024-entry table,
and compares the result with the direct sums. It prints
`Matches: <count> (257)`.

Options:

- `--size` sets the signal length.
- `--table-size` sets the table size. It must be a multiple of the size.
- `--seed` sets the random seed.
- `--tolerance` sets how close a bin must be to count as a match.

## What it does not do

Everything is plain Python lists and floats, so it is meant for checking
and experimenting rather than speed. There is no file input or output
and no plotting. The only command is the self-check above.