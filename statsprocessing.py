import math
from typing import Callable, Sequence

from sortedcontainers import SortedList


def _require_samples(samples):
    if len(samples) == 0:
        raise ValueError("samples must not be empty")


def extract_mean(samples: Sequence[float]) -> float:
    _require_samples(samples)
    return sum(samples) / len(samples)

def extract_variance(samples: Sequence[float]) -> float:
    # выборочная дисперсия (n - 1)
    if len(samples) < 2:
        raise ValueError("at least two samples are required for the variance")
    mean = extract_mean(samples)
    return sum((x - mean) ** 2 for x in samples) / (len(samples) - 1)

def extract_std(samples: Sequence[float]) -> float:
    return math.sqrt(extract_variance(samples))

def extract_summary(samples: Sequence[float]):
    return {
        'count': len(samples),
        'mean': extract_mean(samples),
        'std': extract_std(samples),
        'min': min(samples),
        'max': max(samples),
    }


def empirical_cdf(samples: Sequence[float]) -> Callable[[float], float]:
    _require_samples(samples)
    ordered = SortedList(samples)
    n = len(ordered)

    def cdf(x: float) -> float:
        return ordered.bisect_right(x) / n

    return cdf


def ks_distance(samples: Sequence[float], cdf: Callable[[float], float]) -> float:
    """Kolmogorov-Smirnov statistic sup |F_n(x) - F(x)| for continuous ``cdf``."""
    _require_samples(samples)
    ordered = SortedList(samples)
    n = len(ordered)
    distance = 0.0
    for i, x in enumerate(ordered):
        f = cdf(x)
        # F_n прыгает в каждой точке, проверяем обе стороны скачка
        distance = max(distance, (i + 1) / n - f, f - i / n)
    return distance
