"""Generator core tests: fixed-width arithmetic, specializations, batch forms."""

import pytest

from lcg import generate_seed, lcg, lcg32, lcg32_array, lcg64, lcg64_array, lcg_array
from models import INT_MAX, LCG64, LONG_MAX, LCGParameters, to_signed, truncating_mod


def test_lcg_is_deterministic():
    assert lcg(7, 5, 1, 16) == lcg(7, 5, 1, 16) == 4
    assert lcg(3, 5, 1, 16) == 0


def test_lcg_stays_in_range_without_overflow():
    for seed in range(200):
        value = lcg(seed, 48271, 1, INT_MAX)
        assert 0 <= value < INT_MAX


def test_lcg_zero_modulus_is_arithmetic_fault():
    with pytest.raises(ZeroDivisionError):
        lcg(1, 2, 3, 0)


def test_lcg_multiplication_wraps_at_64_bits():
    # 4 * 2**62 == 2**64 -> 0
    assert lcg(2**62, 4, 0, LONG_MAX) == 0
    # 2 * 2**62 == 2**63 -> -2**63, remainder keeps the sign
    assert lcg(2**62, 2, 0, LONG_MAX) == -1


def test_lcg_negative_operands_use_truncating_remainder():
    assert lcg(-5, 3, 0, 7) == -1
    assert truncating_mod(-15, 7) == -1
    assert truncating_mod(15, -7) == 1


def test_lcg64_fixed_parameters():
    assert lcg64(0) == 0
    assert lcg64(1) == 5428252657583070383
    assert lcg64(2) == lcg(2, LCG64.multiplier, 0, LCG64.modulus)


def test_lcg32_fixed_parameters_and_narrowing():
    assert lcg32(0) == 1
    assert lcg32(1) == 48272
    # seed 2**31 narrows to -2**31 before the step
    assert lcg32(2**31) == -48270
    assert -2**31 <= lcg32(123456789) < 2**31


def test_generate_seed_is_non_negative_int():
    seed = generate_seed()
    assert isinstance(seed, int)
    assert seed >= 0


def test_lcg_array_threads_state():
    assert lcg_array(1, 5, 1, 16, 3) == [6, 15, 12]


def test_lcg_array_size_contract():
    assert lcg_array(1, 5, 1, 16, 0) == []
    with pytest.raises(ValueError):
        lcg_array(1, 5, 1, 16, -1)
    with pytest.raises(ValueError):
        lcg64_array(1, 2.5)


def test_lcg64_array_matches_repeated_steps():
    first = lcg64(42)
    assert lcg64_array(42, 3) == [first, lcg64(first), lcg64(lcg64(first))]


def test_lcg32_array_matches_repeated_steps():
    expected = []
    state = 9
    for _ in range(5):
        state = lcg32(state)
        expected.append(state)
    assert lcg32_array(9, 5) == expected


def test_lcg32_array_custom_multiplier():
    assert lcg32_array(1, 2, multiplier=16807, increment=0) == [16807, 16807 * 16807 % INT_MAX]


def test_to_signed_wraps_both_widths():
    assert to_signed(2**63, 64) == -2**63
    assert to_signed(2**64 + 5, 64) == 5
    assert to_signed(2**32 + 5, 32) == 5
    assert to_signed(-1, 32) == -1


def test_parameters_are_validated():
    with pytest.raises(ValueError):
        LCGParameters(multiplier=1, increment=0, modulus=0)
    with pytest.raises(ValueError):
        LCGParameters(multiplier=16, increment=0, modulus=16)
    with pytest.raises(ValueError):
        LCGParameters(multiplier=3, increment=-1, modulus=16)
    with pytest.raises(ValueError):
        LCGParameters(multiplier=3, increment=1, modulus=16, bits=16)
