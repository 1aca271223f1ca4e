import numpy as np
from typing import Union

from typing_extensions import override

from agent.algo.base_algo.BaseAlgo import BaseAlgo
from agent.learner.ConstantStepLearner import ConstantStepLearner
from agent.policy.SoftmaxPolicy import SoftmaxPolicy


class SoftmaxLoadBalancer(BaseAlgo):
    """
    Client side load balancer: softmax selection over latency estimates,
    learned with a constant step size so it follows drifting servers
    """

    def __init__(self, server_nb: int = 4, tau: float = 20.0, alpha: float = 0.1, **kwargs) -> None:
        super().__init__(out_dim=server_nb, **kwargs)
        self.policy = SoftmaxPolicy(server_nb=server_nb, tau=tau)
        self.learner = ConstantStepLearner(alpha=alpha)

    @override
    def init_single_test(self, rng: np.random.Generator) -> None:
        self.policy.reset(rng)

    @override
    def choose_action(self, *args, **kwargs) -> int:
        return self.policy.select()

    @override
    def update(self, action: Union[int, np.integer], reward: float) -> float:
        return self.learner.update(self.policy, action, reward)

    @override
    def get_q_values(self) -> np.ndarray:
        return self.policy.get_q_values()

    @override
    def get_probabilities(self) -> np.ndarray:
        return self.policy.probabilities()
