import logging

from agent.abstract.AbstractResultRecorder import AbstractResultRecorder


class TestResult(AbstractResultRecorder):
    # Not a pytest test class
    __test__ = False

    def __init__(self, agent_name=None):
        self.agent_name = agent_name
        self.total_rewards = 0.0
        self.total_latencies = 0.0
        self.total_best_pick_rates = 0.0
        self.nb_runs = 0

        # Key: seed
        self.play_history = {}
        self.q_values = {}
        self.selection_counts = {}
        self.env_snaps = {}

    def update(self, total_reward=0.0, average_latency=0.0, best_pick_rate=0.0, play_history=None,
               q_values=None, selection_counts=None, env_snap=None, seed=None):
        self.total_rewards += total_reward
        self.total_latencies += average_latency
        self.total_best_pick_rates += best_pick_rate
        self.nb_runs += 1
        self.play_history[seed] = play_history
        self.q_values[seed] = q_values
        self.selection_counts[seed] = selection_counts
        self.env_snaps[seed] = env_snap

    def update_from_single_result(self, single_result):
        history = single_result.get_history()
        self.update(
            total_reward=single_result.total_reward,
            average_latency=single_result.get_average_latency(),
            best_pick_rate=history.get_best_pick_rate() if history is not None else 0.0,
            play_history=history,
            q_values=single_result.q_values,
            selection_counts=single_result.selection_counts,
            env_snap=single_result.env_snap,
            seed=single_result.seed,
        )

    def get_q_values(self):
        return self.q_values

    def get_history(self):
        return self.play_history

    def get_summary(self):
        assert self.nb_runs > 0, "No run recorded yet"
        average_reward = float(self.total_rewards) / float(self.nb_runs)
        average_latency = float(self.total_latencies) / float(self.nb_runs)
        best_pick_rate = float(self.total_best_pick_rates) / float(self.nb_runs)

        return average_reward, average_latency, best_pick_rate

    def get_summary_dict(self):
        average_reward, average_latency, best_pick_rate = self.get_summary()
        output_dict = {
            "agent_name": self.agent_name,
            "average_reward": average_reward,
            "average_latency": average_latency,
            "best_pick_rate": best_pick_rate,
            "nb_runs": self.nb_runs,
        }
        return output_dict

    def log(self, display=False):
        average_reward, average_latency, best_pick_rate = self.get_summary()
        logging.info(f"Agent name:{self.agent_name}")
        logging.info(f"Runs: {self.nb_runs}")
        logging.info(f"Average reward :{average_reward}")
        logging.info(f"Average latency :{average_latency:.2f} ms")
        logging.info(f"Best server pick rate: {100.0 * best_pick_rate:.1f}%")
        if display:
            print(f"Agent name:{self.agent_name}")
            print(f"Runs: {self.nb_runs}")
            print(f"Average reward :{average_reward}")
            print(f"Average latency :{average_latency:.2f} ms")
            print(f"Best server pick rate: {100.0 * best_pick_rate:.1f}%")
