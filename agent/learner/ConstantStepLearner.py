from typing import Union

import numpy as np

from agent.policy.SoftmaxPolicy import SoftmaxPolicy


class ConstantStepLearner:
    """
    Exponential recency-weighted average: Q[k] <- Q[k] + alpha * (reward - Q[k]).

    The constant step size keeps tracking servers whose latency drifts, where a
    sample average would freeze on old observations.
    """

    def __init__(self, alpha: float = 0.1) -> None:
        assert 0 < alpha <= 1, f"alpha should be in (0, 1], get {alpha}"
        self.alpha = alpha

    def update(self, policy: SoftmaxPolicy, server: Union[int, np.integer], reward: float) -> float:
        server = int(server)
        assert 0 <= server < policy.server_nb, f"server index should be in [0, {policy.server_nb}), get {server}"
        policy.q_values[server] += self.alpha * (reward - policy.q_values[server])
        return float(policy.q_values[server])
