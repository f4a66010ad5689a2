import math

# коэффициенты Абрамовица-Стиган 7.1.26
ERF_P = 0.47047
ERF_A1 = 0.3480242
ERF_A2 = -0.0958798
ERF_A3 = 0.7478556

SQRT2 = math.sqrt(2)


def log(x: float) -> float:
    """Natural logarithm with IEEE-754 edge values instead of ValueError.

    ``log(0) == -inf`` and ``log(x) is nan`` for negative or nan ``x``.
    """
    if x == 0:
        return -math.inf
    if not x > 0:
        return math.nan
    return math.log(x)


def log1p(x: float) -> float:
    # ln(1 + x) без потери точности при малых x; log1p(-1) == -inf
    if x == -1:
        return -math.inf
    if not x > -1:
        return math.nan
    return math.log1p(x)


def erf(x: float) -> float:
    """Abramowitz-Stegun approximation of the error function.

    Maximum absolute error is about 5e-4. The rational form only holds for
    ``x >= 0``; negative arguments use ``erf(-x) == -erf(x)``.
    """
    if x < 0:
        return -erf(-x)
    t = 1 / (1 + ERF_P * x)
    return 1 - (ERF_A1 * t + ERF_A2 * t**2 + ERF_A3 * t**3) * math.exp(-(x * x))


def pnorm(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    # P(X <= x) для X ~ N(mu, sigma)
    if not sigma > 0:
        raise ValueError(f"sigma must be greater than 0, got {sigma!r}")
    return 0.5 * (1 + erf((x - mu) / (SQRT2 * sigma)))
