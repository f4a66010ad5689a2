import logging
from typing import List, Optional

import simpy

from samplers import Source, exponential, standard_uniform

logger = logging.getLogger(__name__)


class ArrivalProcess:
    """Poisson process: arrivals separated by Exponential(lam) gaps.

    The number of arrivals in ``[0, 1)`` is a Poisson(lam) realization,
    the same quantity ``samplers.poisson`` counts without a clock.
    """

    def __init__(self, env: simpy.Environment, lam: float, source: Optional[Source] = None, logging_on=False):
        if not lam > 0:
            raise ValueError(f"lam must be greater than 0, got {lam!r}")
        self.env = env
        self.lam = lam
        self.source = source or standard_uniform
        self.logging_on = logging_on

        self.arrival_times: List[float] = []
        self.finished = False

    def run(self, horizon: float):
        # одноразовый: второй вызов на том же env уже за горизонтом
        if self.finished:
            raise RuntimeError("ArrivalProcess.run can only be called once; create a new process on a fresh simpy.Environment")
        if not horizon > 0:
            raise ValueError(f"horizon must be greater than 0, got {horizon!r}")
        self.env.process(self.arrive(horizon))
        self.env.run(until=horizon)
        self.finished = True
        return self.arrival_times

    def log(self, message):
        if self.logging_on:
            logger.debug(f"{self.env.now}|{message}")

    def arrive(self, horizon: float):
        while True:
            gap = exponential(self.lam, source=self.source)
            # прибытие на самой границе или позже уже не считается
            if self.env.now + gap >= horizon:
                self.log(f"next arrival falls past horizon {horizon}")
                return
            yield self.env.timeout(gap)
            self.arrival_times.append(self.env.now)
            self.log(f"arrival #{len(self.arrival_times)}")


def simulate_arrivals(lam: float, horizon: float = 1.0, source: Optional[Source] = None) -> List[float]:
    env = simpy.Environment()
    return ArrivalProcess(env, lam, source=source).run(horizon)


def count_arrivals(lam: float, horizon: float = 1.0, source: Optional[Source] = None) -> int:
    return len(simulate_arrivals(lam, horizon, source))
