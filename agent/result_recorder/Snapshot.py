import numpy as np


class Snapshot:
    """
    State of a run at one reporting point. Arrays are copied, so later steps don't alter it
    """
    def __init__(self, step, total_reward, q_values, probabilities, selection_counts):
        self.step = step
        self.total_reward = total_reward
        self.q_values = np.array(q_values, dtype=np.float64)
        self.probabilities = np.array(probabilities, dtype=np.float64)
        self.selection_counts = np.array(selection_counts, dtype=np.int64)

    def get_average_latency(self):
        return -self.total_reward / self.step

    def get_latency_estimates(self):
        return -self.q_values
