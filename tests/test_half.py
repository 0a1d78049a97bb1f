import random

import pytest

from radixconv.check import direct_spectrum
from radixconv.half import half_conv_end, half_conv_final, half_hadamard, half_hartley
from radixconv.tables import bit_reversal, random_signal, twiddles
from radixconv.transform import Bin, conv_final


@pytest.mark.parametrize("n", [8, 16, 32, 64, 256])
def test_half_hartley_matches_direct_odd_bins(n):
    rng = random.Random(n)
    x = random_signal(n, rng)
    table = twiddles(n)
    result = half_hartley(x, bit_reversal(n), table, n)
    reference = direct_spectrum(x, table, n)
    assert len(result) == n // 4
    for k, got in enumerate(result):
        want = reference[2 * k + 1]
        assert got.c == pytest.approx(want.c, abs=1e-12)
        assert got.s == pytest.approx(want.s, abs=1e-12)


def test_half_hartley_ignores_even_content():
    n = 32
    x = [1.0] * n
    result = half_hartley(x, bit_reversal(n), twiddles(n), n)
    assert all(abs(b.c) < 1e-12 and abs(b.s) < 1e-12 for b in result)


def test_half_hartley_rejects_small_size():
    with pytest.raises(ValueError):
        half_hartley([0.0] * 4, bit_reversal(4), twiddles(4), 4)


def test_half_hartley_rejects_wrong_index_count():
    with pytest.raises(ValueError):
        half_hartley([0.0] * 16, bit_reversal(8), twiddles(16), 16)


def test_half_hartley_rejects_short_signal():
    with pytest.raises(ValueError):
        half_hartley([0.0] * 8, bit_reversal(16), twiddles(16), 16)


def test_half_hadamard_with_unit_weights():
    z = [Bin(2.0, 3.0), Bin(-1.0, 0.5)]
    w = [Bin(1.0, 0.0)] * 2
    out = half_hadamard(w, z, 4)
    assert out[0] == pytest.approx(z[0].c + z[0].s)
    assert out[3] == pytest.approx(z[0].c - z[0].s)
    assert out[1] == pytest.approx(z[1].c + z[1].s)
    assert out[2] == pytest.approx(z[1].c - z[1].s)


def test_half_hadamard_is_symmetric_in_arguments():
    rng = random.Random(3)
    w = [Bin(rng.random(), rng.random()) for _ in range(4)]
    z = [Bin(rng.random(), rng.random()) for _ in range(4)]
    assert half_hadamard(w, z, 8) == pytest.approx(half_hadamard(z, w, 8))


def test_half_hadamard_rejects_odd_length():
    with pytest.raises(ValueError):
        half_hadamard([Bin(1.0, 0.0)] * 2, [Bin(1.0, 0.0)] * 2, 3)


def test_half_hadamard_rejects_short_inputs():
    with pytest.raises(ValueError):
        half_hadamard([Bin(1.0, 0.0)], [Bin(1.0, 0.0)] * 4, 8)


def test_half_conv_final_zero_spectrum_keeps_g():
    g = [float(i) for i in range(8)]
    out = half_conv_final(g, [Bin(0.0, 0.0)] * 5, twiddles(8), 8)
    assert out == g


def test_half_conv_final_is_affine_in_g():
    rng = random.Random(5)
    spectrum = [Bin(rng.random(), rng.random()) for _ in range(5)]
    g = [rng.random() for _ in range(8)]
    table = twiddles(8)
    with_g = half_conv_final(g, spectrum, table, 8)
    without_g = half_conv_final([0.0] * 8, spectrum, table, 8)
    assert [a - b for a, b in zip(with_g, without_g)] == pytest.approx(g)


def test_half_conv_final_scales_with_n():
    rng = random.Random(7)
    spectrum = [Bin(rng.random(), rng.random()) for _ in range(5)]
    table = twiddles(8)
    small = half_conv_final([0.0] * 8, spectrum, table, 8)
    large = half_conv_final([0.0] * 8, spectrum, table, 16)
    assert small == pytest.approx([2 * v for v in large])


def test_half_conv_final_rejects_short_g():
    with pytest.raises(ValueError):
        half_conv_final([0.0] * 3, [Bin(0.0, 0.0)] * 5, twiddles(8), 8)


def test_half_conv_end_with_zero_z_is_conv_final():
    rng = random.Random(11)
    spectrum = [Bin(rng.random(), rng.random()) for _ in range(5)]
    assert half_conv_end([0.0] * 8, spectrum, 8) == pytest.approx(conv_final(spectrum, 8))


def test_half_conv_end_subtracts_z():
    rng = random.Random(13)
    spectrum = [Bin(rng.random(), rng.random()) for _ in range(5)]
    z = conv_final(spectrum, 8)
    assert half_conv_end(z, spectrum, 8) == pytest.approx([0.0] * 8)


def test_half_conv_end_rejects_short_z():
    with pytest.raises(ValueError):
        half_conv_end([0.0] * 4, [Bin(0.0, 0.0)] * 5, 8)