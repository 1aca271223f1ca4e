from typing import Optional

import numpy as np


class LatencyServer:
    def __init__(self, index: int, rng: np.random.Generator, init_low: float = 50.0, init_high: float = 200.0,
                 true_latency: Optional[float] = None) -> None:
        """
        One candidate server with a hidden mean response time (ms).

        :param index: position of the server in its pool
        :param rng: shared random generator of the run
        :param init_low: lower bound of the initial latency draw
        :param init_high: upper bound (excluded) of the initial latency draw
        :param true_latency: fixed initial latency, no random draw is consumed when given
        """
        assert init_high > init_low, f"init_high should be > init_low, get [{init_low}, {init_high})"

        self.id = index
        self._rng = rng
        # One uniform draw per server, taken in index order by the pool
        self._true_latency = float(true_latency) if true_latency is not None \
            else float(rng.uniform(init_low, init_high))

    def observe(self, noise_std: float = 10.0, floor: float = 1.0) -> float:
        """
        Measure one response time: true latency plus gaussian noise, floored.
        Consumes exactly one random draw.
        """
        noise = self._rng.normal(0.0, noise_std)
        return max(floor, self._true_latency + noise)

    def drift(self, drift_std: float = 1.0, low: float = 10.0, high: float = 500.0) -> float:
        """
        Random walk step of the true latency, clamped into [low, high].
        Consumes exactly one random draw.
        """
        self._true_latency += self._rng.normal(0.0, drift_std)
        self._true_latency = max(low, min(high, self._true_latency))
        return self._true_latency

    def get_true_latency(self) -> float:
        return self._true_latency

    def display(self) -> None:
        print(f"id: {self.id}")
        print(f"true_latency: {self._true_latency:.1f} ms")
