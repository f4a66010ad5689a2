"""Seed source and linear congruential generators.

Arithmetic mirrors fixed-width 64-bit integers: the product ``a * seed``
wraps in two's complement and the remainder carries the sign of the
dividend. The wraparound is part of the generator's output and is kept
bit-for-bit. None of this is suitable for cryptographic use.
"""

import time
from typing import List

from models import LCG32, LCG64, LCGParameters, to_signed, truncating_mod


def generate_seed() -> int:
    """Non-negative seed read from the high-resolution monotonic clock.

    This is the only entropy the module-level samplers have: every call
    reads the clock again, so results are not reproducible.
    """
    now = time.perf_counter_ns()
    return -now if now < 0 else now


def lcg(seed: int, multiplier: int, increment: int, modulus: int) -> int:
    # modulus == 0 -> ZeroDivisionError
    product = to_signed(multiplier * to_signed(seed, 64), 64)
    return truncating_mod(to_signed(product + increment, 64), modulus)


def step(state: int, parameters: LCGParameters) -> int:
    value = lcg(to_signed(state, parameters.bits), parameters.multiplier, parameters.increment, parameters.modulus)
    return to_signed(value, parameters.bits)


def lcg64(seed: int) -> int:
    return step(seed, LCG64)


def lcg32(seed: int) -> int:
    return step(seed, LCG32)


def validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ValueError(f"Size must be a non-negative integer, got {size!r}")
    return size


def lcg_array(seed: int, multiplier: int, increment: int, modulus: int, size: int) -> List[int]:
    """Successive states X_1..X_size of the generator started at ``seed``."""
    validate_size(size)
    output = []
    state = seed
    for _ in range(size):
        state = lcg(state, multiplier, increment, modulus)
        output.append(state)
    return output


def lcg64_array(seed: int, size: int, multiplier: int = LCG64.multiplier, increment: int = LCG64.increment) -> List[int]:
    return lcg_array(seed, multiplier, increment, LCG64.modulus, size)


def lcg32_array(seed: int, size: int, multiplier: int = LCG32.multiplier, increment: int = LCG32.increment) -> List[int]:
    # состояние сужается до 32 бит на каждом шаге
    parameters = LCGParameters(multiplier, increment, LCG32.modulus, bits=32)
    validate_size(size)
    output = []
    state = seed
    for _ in range(size):
        state = step(state, parameters)
        output.append(state)
    return output
