from typing import Collection, Optional, Union

import numpy as np

from env.server_pool.LatencyServer import LatencyServer


class ServerPool:
    def __init__(self, rng: np.random.Generator, server_nb: int = 4, true_latencies: Optional[Collection[float]] = None,
                 noise_std: float = 10.0, drift_std: float = 1.0, init_low: float = 50.0, init_high: float = 200.0,
                 latency_low: float = 10.0, latency_high: float = 500.0, latency_floor: float = 1.0) -> None:
        if true_latencies is None:
            assert type(server_nb) == int, f"server_nb should be int. Current type:{type(server_nb)}"
            assert server_nb > 0, f"server_nb should be > 0. Current value:{server_nb}"
            self.server_nb = server_nb
            self.servers = [LatencyServer(index=i, rng=rng, init_low=init_low, init_high=init_high)
                            for i in range(server_nb)]
        # Fixed ground truth, mostly for tests
        else:
            assert hasattr(true_latencies, '__iter__')
            assert len(true_latencies) > 0, "true_latencies should not be empty"
            self.server_nb = len(true_latencies)
            self.servers = [LatencyServer(index=i, rng=rng, true_latency=latency)
                            for i, latency in enumerate(true_latencies)]

        assert noise_std >= 0, f"noise_std should be >= 0, get {noise_std}"
        assert drift_std >= 0, f"drift_std should be >= 0, get {drift_std}"
        assert latency_high > latency_low, f"latency clamp [{latency_low}, {latency_high}] is empty"
        self.noise_std = noise_std
        self.drift_std = drift_std
        self.latency_low = latency_low
        self.latency_high = latency_high
        self.latency_floor = latency_floor

    def observe(self, server: Union[int, np.integer]) -> float:
        server = int(server)
        assert 0 <= server < self.server_nb, f"server index should be in [0, {self.server_nb}), get {server}"
        return self.servers[server].observe(noise_std=self.noise_std, floor=self.latency_floor)

    def drift(self) -> list[float]:
        # Every server moves, whichever one was observed
        return [server.drift(drift_std=self.drift_std, low=self.latency_low, high=self.latency_high)
                for server in self.servers]

    def display(self) -> None:
        for server in self.servers:
            server.display()

    def get_true_latencies(self) -> list[float]:
        return [server.get_true_latency() for server in self.servers]

    def get_best_server(self) -> int:
        return int(np.argmin(self.get_true_latencies()))

    def get_min_true_latency(self) -> float:
        return min(self.get_true_latencies())
