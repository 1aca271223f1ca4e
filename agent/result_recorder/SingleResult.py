import numpy as np


class SingleResult:
    def __init__(self, agent_name=None, server_nb=1, seed=None, env_snap=None):
        self.agent_name = agent_name
        self.seed = seed
        self.steps = 0
        self.total_reward = 0.0
        self.selection_counts = np.zeros(server_nb, dtype=np.int64)
        self.snapshots = []
        self.q_values = None
        self.probabilities = None
        self.play_history = None
        self.env_snap = env_snap

    def get_total_reward(self):
        return self.total_reward

    def update_selection(self, server):
        self.selection_counts[int(server)] += 1
        self.steps += 1

    def update_reward(self, new_reward):
        self.total_reward += new_reward

    def update_snapshot(self, snapshot):
        self.snapshots.append(snapshot)

    def update_history(self, play_history):
        self.play_history = play_history

    def update_q_values(self, q_values):
        self.q_values = q_values

    def update_probabilities(self, probabilities):
        self.probabilities = probabilities

    def get_history(self):
        return self.play_history

    def get_average_latency(self):
        return -self.total_reward / self.steps if self.steps > 0 else 0.0

    def get_selection_shares(self):
        """Percentage of requests sent to each server"""
        if self.steps == 0:
            return np.zeros(len(self.selection_counts))
        return 100.0 * self.selection_counts / self.steps

    def get_summary_dict(self):
        output_dict = {
            "agent_name": self.agent_name,
            "seed": self.seed,
            "steps": self.steps,
            "total_reward": self.total_reward,
            "average_latency": self.get_average_latency(),
        }
        return output_dict
