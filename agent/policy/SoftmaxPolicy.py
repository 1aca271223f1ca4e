from typing import Optional, Sequence, Union

import numpy as np


class ProbabilityUnderflowError(Exception):
    def __init__(self, total: float) -> None:
        error_message = f"Softmax normalizer should be > 0, get {total}."
        super().__init__(error_message)


def softmax(values: Union[Sequence[float], np.ndarray], tau: float = 20.0) -> np.ndarray:
    '''
    Boltzmann distribution over value estimates: exp(Q[k] / tau) / sum_j exp(Q[j] / tau).

    The maximum is subtracted before exponentiating, so the largest term is exactly 1
    and the normalizer is at least 1 for any finite input.

    :param values: value estimates, one per action
    :param tau: temperature, higher is flatter
    :return: probabilities in the same order as values
    '''
    assert tau > 0, f"tau should be > 0, get {tau}"
    q = np.asarray(values, dtype=np.float64)
    assert q.ndim == 1 and q.size > 0, f"values should be a non empty 1D sequence, get shape {q.shape}"
    if not np.all(np.isfinite(q)):
        raise ValueError(f"Value estimates should be finite, get {q}")

    exp_q = np.exp((q - np.max(q)) / tau)
    total = np.sum(exp_q)
    if not total > 0:
        raise ProbabilityUnderflowError(float(total))
    return exp_q / total


class SoftmaxPolicy:
    """
    Softmax action selection over learned value estimates (Q), one per server.

    Q starts at 0 everywhere, which makes the first choices uniform.
    """

    def __init__(self, server_nb: int = 4, tau: float = 20.0, rng: Optional[np.random.Generator] = None) -> None:
        assert type(server_nb) == int and server_nb > 0, f"server_nb should be a positive int, get {server_nb}"
        assert tau > 0, f"tau should be > 0, get {tau}"
        self.server_nb = server_nb
        self.tau = tau
        self.rng = rng
        self.q_values = np.zeros(server_nb)

    def reset(self, rng: np.random.Generator) -> None:
        self.rng = rng
        self.q_values = np.zeros(self.server_nb)

    def probabilities(self) -> np.ndarray:
        return softmax(self.q_values, self.tau)

    def select(self) -> int:
        """
        Roulette wheel draw: one uniform r in [0, 1), first index whose cumulative
        probability reaches r. Rounding may leave the last cumulative value short
        of r, the last server is returned in that case.
        """
        assert self.rng is not None, "Policy should be reset with a random generator before select"
        cumulative = np.cumsum(self.probabilities())
        r = self.rng.random()
        index = int(np.searchsorted(cumulative, r, side='left'))
        return index if index < self.server_nb else self.server_nb - 1

    def get_q_values(self) -> np.ndarray:
        return self.q_values.copy()
