from dataclasses import dataclass

# =============== #
#    КОНСТАНТЫ    #
# =============== #

E = 2.7182818284590452354
PI = 3.14159265358979323846

LONG_MAX = 2**63 - 1
INT_MAX = 2**31 - 1


def to_signed(value: int, bits: int) -> int:
    # заворачивает int в дополнительный код заданной ширины
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def truncating_mod(value: int, modulus: int) -> int:
    # остаток берет знак делимого, как в C/Java
    remainder = abs(value) % abs(modulus)
    return -remainder if value < 0 else remainder


# =============== #
#  МОДЕЛИ ДАННЫХ  #
# =============== #

@dataclass(frozen=True)
class LCGParameters:
    multiplier: int  # a
    increment: int   # c
    modulus: int     # m
    bits: int = 64   # ширина слова состояния

    def __post_init__(self):
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")
        if self.modulus <= 0:
            raise ValueError(f"modulus must be positive, got {self.modulus}")
        if not 0 <= self.multiplier < self.modulus:
            raise ValueError(f"multiplier must lie in [0, {self.modulus}), got {self.multiplier}")
        if not 0 <= self.increment < self.modulus:
            raise ValueError(f"increment must lie in [0, {self.modulus}), got {self.increment}")

    @property
    def scale(self) -> int:
        # наибольшее значение знакового слова, на него делим для [0, 1)
        return LONG_MAX if self.bits == 64 else INT_MAX


LCG64 = LCGParameters(
    multiplier=5428252657583070383,
    increment=0,
    modulus=LONG_MAX - 4568,
)

LCG32 = LCGParameters(
    multiplier=48271,
    increment=1,
    modulus=INT_MAX,
    bits=32,
)


class SamplerConfig:
    NORMAL_MAX_REJECTIONS: int
    POISSON_THRESHOLD: float
    LCG_PARAMETERS: LCGParameters

    def __init__(
            self,
            NORMAL_MAX_REJECTIONS = 10_000,
            POISSON_THRESHOLD = 1.0,
            LCG_PARAMETERS = LCG64,
        ):
        if not isinstance(NORMAL_MAX_REJECTIONS, int) or NORMAL_MAX_REJECTIONS <= 0:
            raise ValueError(f"NORMAL_MAX_REJECTIONS must be a positive integer, got {NORMAL_MAX_REJECTIONS!r}")
        if not POISSON_THRESHOLD > 0:
            raise ValueError(f"POISSON_THRESHOLD must be greater than 0, got {POISSON_THRESHOLD!r}")
        self.NORMAL_MAX_REJECTIONS = NORMAL_MAX_REJECTIONS
        self.POISSON_THRESHOLD = POISSON_THRESHOLD
        self.LCG_PARAMETERS = LCG_PARAMETERS


DEFAULT_SAMPLER_CONFIG = SamplerConfig()
