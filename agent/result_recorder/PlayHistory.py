from typing import Optional

import numpy as np
from typing_extensions import override

from agent.abstract.AbstractResultRecorder import AbstractResultRecorder


class PlayHistory(AbstractResultRecorder):
    """
    Step by step trace of one run, filled by the environment on each request
    """
    def __init__(self) -> None:
        self.actions: list[int] = []
        self.latencies: list[float] = []
        self.rewards: list[float] = []
        self.q_values: list[Optional[float]] = []
        self.true_latencies: list[float] = []
        self.best_true_latencies: list[float] = []

    def __str__(self) -> str:
        return ",".join(str(action) for action in self.actions)

    def __len__(self) -> int:
        return len(self.actions)

    @override
    def update(self, action: int, latency: float, reward: float, true_latency: float,
               best_true_latency: float) -> None:
        self.actions.append(int(action))
        self.latencies.append(latency)
        self.rewards.append(reward)
        self.true_latencies.append(true_latency)
        self.best_true_latencies.append(best_true_latency)
        # Filled once the learner has updated the estimate
        self.q_values.append(None)

    def update_q_value(self, q_value: float) -> None:
        assert len(self.q_values) > 0, "No request recorded yet"
        self.q_values[-1] = q_value

    def get_best_pick_rate(self) -> float:
        if len(self.actions) == 0:
            return 0.0
        picks = np.array(self.true_latencies) == np.array(self.best_true_latencies)
        return float(np.mean(picks))

    def get_regret(self) -> float:
        return float(np.sum(np.array(self.true_latencies) - np.array(self.best_true_latencies)))

    @override
    def get_summary(self) -> dict:
        return {"step_nb": len(self.actions), "best_pick_rate": self.get_best_pick_rate(),
                "regret": self.get_regret()}
