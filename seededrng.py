import logging
from typing import Optional, Sequence

import samplers
from lcg import generate_seed, step
from models import DEFAULT_SAMPLER_CONFIG, LCGParameters, SamplerConfig, to_signed, truncating_mod

logger = logging.getLogger(__name__)


class SeededRNG:
    # Реализован как LCG генератор, состояние принадлежит вызывающему
    parameters: LCGParameters
    config: SamplerConfig
    state: int  # текущее состояние

    def __init__(self, seed: Optional[int] = None, config: Optional[SamplerConfig] = None):
        self.config = config or DEFAULT_SAMPLER_CONFIG
        self.parameters = self.config.LCG_PARAMETERS
        seed = seed if seed is not None else generate_seed()
        # сужаем до ширины слова, как это делает step
        self.state = to_signed(seed, self.parameters.bits)

        if self.parameters.increment == 0 and truncating_mod(self.state, self.parameters.modulus) == 0:
            raise ValueError(f"seed {self.state} is a fixed point of a generator without increment")
        logger.debug("seeded generator with state %d", self.state)

    def next_state(self) -> int:
        self.state = step(self.state, self.parameters)
        return self.state

    def random(self) -> float:
        output = self.next_state() / self.parameters.scale
        return -output if output < 0 else output

    def uniform(self, low=0.0, high=1.0, size=None):
        return samplers.uniform(low, high, size, source=self.random)

    def randint(self, a: int, b: int) -> int:
        # включительно a..b
        if a > b:
            raise ValueError(f"Upper bound must not be less than lower bound, got a={a!r}, b={b!r}")
        return a + int(self.random() * (b - a + 1))

    def choice(self, seq: Sequence):
        if len(seq) == 0:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randint(0, len(seq) - 1)]

    def exponential(self, lam, size=None):
        return samplers.exponential(lam, size, source=self.random)

    def bernoulli(self, p, size=None):
        return samplers.bernoulli(p, size, source=self.random)

    def binomial(self, n, p, size=None):
        return samplers.binomial(n, p, size, source=self.random)

    def normal(self, mu=0.0, sigma=1.0, size=None):
        return samplers.normal(mu, sigma, size, source=self.random, config=self.config)

    def geometric(self, p, size=None):
        return samplers.geometric(p, size, source=self.random)

    def poisson(self, lam, size=None):
        return samplers.poisson(lam, size, source=self.random, config=self.config)

    def truncated_normal(self, mu, sigma, low, high, size=None):
        return samplers.truncated_normal(mu, sigma, low, high, size, source=self.random)
