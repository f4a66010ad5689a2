import logging
import math
from typing import Callable, Optional

from scipy.special import erfinv

from lcg import generate_seed, lcg64, validate_size
from models import DEFAULT_SAMPLER_CONFIG, LONG_MAX, SamplerConfig
from special import SQRT2, log, log1p, pnorm

logger = logging.getLogger(__name__)

# источник равномерных чисел из [0, 1)
Source = Callable[[], float]


class RejectionLimitError(RuntimeError):
    pass


def standard_uniform() -> float:
    """One draw from U[0, 1), freshly seeded from the clock.

    lcg64 can return a negative state after the signed wraparound, so the
    absolute value is taken. That only fixes the sign; it is not part of
    the distribution transform.
    """
    output = lcg64(generate_seed()) / LONG_MAX
    return -output if output < 0 else output


def batch(sampler: Callable, size: int, *args, **kwargs) -> list:
    # size проверяется здесь, для всех распределений одинаково
    validate_size(size)
    return [sampler(*args, **kwargs) for _ in range(size)]


def _draw(sampler: Callable, size: Optional[int], *args):
    if size is None:
        return sampler(*args)
    return batch(sampler, size, *args)


def _check_probability(p: float):
    if not (0.0 <= p and p <= 1.0):
        raise ValueError(f"0 <= p <= 1 must hold, got p={p!r}")


def _check_positive(name: str, value: float):
    if not value > 0:
        raise ValueError(f"{name} must be greater than 0, got {value!r}")


# =============== #
#  РАСПРЕДЕЛЕНИЯ  #
# =============== #

def _uniform(low: float, high: float, source: Source) -> float:
    return source() * (high - low) + low


def uniform(low: float = 0.0, high: float = 1.0, size: Optional[int] = None, source: Optional[Source] = None):
    """Draw from U[low, high); pass ``size=`` by keyword for a batch.

    ``uniform(5)`` means ``low=5``, not five draws; use ``uniform(size=5)``.
    """
    return _draw(_uniform, size, low, high, source or standard_uniform)


def _exponential(lam: float, source: Source) -> float:
    # обратная функция распределения; source() == 0 дает +inf
    return -(1 / lam) * log(source())


def exponential(lam: float, size: Optional[int] = None, source: Optional[Source] = None):
    _check_positive("lam", lam)
    return _draw(_exponential, size, lam, source or standard_uniform)


def _bernoulli(p: float, source: Source) -> int:
    return 1 if source() < p else 0


def bernoulli(p: float, size: Optional[int] = None, source: Optional[Source] = None):
    _check_probability(p)
    return _draw(_bernoulli, size, p, source or standard_uniform)


def _binomial(n: int, p: float, source: Source) -> int:
    successes = 0
    for _ in range(n):
        successes += _bernoulli(p, source)
    return successes


def binomial(n: int, p: float, size: Optional[int] = None, source: Optional[Source] = None):
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a non-negative integer, got {n!r}")
    _check_probability(p)
    return _draw(_binomial, size, n, p, source or standard_uniform)


def _normal(mu: float, sigma: float, source: Source, max_rejections: int) -> float:
    # полярный метод Бокса-Мюллера
    for attempt in range(1, max_rejections + 1):
        u = 2 * source() - 1
        v = 2 * source() - 1
        r = u * u + v * v
        if r == 0 or r >= 1:
            continue
        if attempt > 1:
            logger.debug("polar normal accepted after %d attempts", attempt)
        return mu + sigma * u * math.sqrt(-2 * math.log(r) / r)
    logger.error("polar normal rejected %d consecutive draws", max_rejections)
    raise RejectionLimitError(f"No point accepted inside the unit circle after {max_rejections} attempts")


def normal(
        mu: float = 0.0,
        sigma: float = 1.0,
        size: Optional[int] = None,
        source: Optional[Source] = None,
        config: Optional[SamplerConfig] = None,
    ):
    _check_positive("sigma", sigma)
    config = config or DEFAULT_SAMPLER_CONFIG
    return _draw(_normal, size, mu, sigma, source or standard_uniform, config.NORMAL_MAX_REJECTIONS)


def _geometric(p: float, source: Source):
    # число неудач до первого успеха, начиная с 0
    failures = log1p(-source()) / log1p(-p)
    # при крошечных p счет не помещается во float
    if math.isinf(failures):
        return math.inf
    return math.floor(failures)


def geometric(p: float, size: Optional[int] = None, source: Optional[Source] = None):
    if not (0.0 < p and p <= 1.0):
        raise ValueError(f"0 < p <= 1 must hold, got p={p!r}")
    return _draw(_geometric, size, p, source or standard_uniform)


def _poisson(lam: float, source: Source, threshold: float) -> int:
    # считаем прибытия с экспоненциальными интервалами до порога
    total = 0.0
    count = -1
    while total < threshold:
        total += _exponential(lam, source)
        count += 1
    return count


def poisson(
        lam: float,
        size: Optional[int] = None,
        source: Optional[Source] = None,
        config: Optional[SamplerConfig] = None,
    ):
    _check_positive("lam", lam)
    config = config or DEFAULT_SAMPLER_CONFIG
    return _draw(_poisson, size, lam, source or standard_uniform, config.POISSON_THRESHOLD)


def _truncated_normal(mu: float, sigma: float, low: float, high: float, source: Source) -> float:
    phi_low = pnorm(low, mu, sigma)
    phi_high = pnorm(high, mu, sigma)

    phi_u = phi_low + source() * (phi_high - phi_low)
    z = SQRT2 * float(erfinv(2 * phi_u - 1))
    # pnorm приближенная, поэтому результат может чуть выйти за границы
    return min(max(mu + z * sigma, low), high)


def truncated_normal(
        mu: float,
        sigma: float,
        low: float,
        high: float,
        size: Optional[int] = None,
        source: Optional[Source] = None,
    ):
    _check_positive("sigma", sigma)
    if not low < high:
        raise ValueError(f"Upper bound must be greater than lower bound, got low={low!r}, high={high!r}")
    return _draw(_truncated_normal, size, mu, sigma, low, high, source or standard_uniform)
