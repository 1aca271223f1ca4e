import logging
import copy
import os
import csv

import numpy as np
from typing import Collection, Optional, Union

from env.server_pool.ServerPool import ServerPool
from env.abstract.Environment import AbstractEnvironment
from agent.result_recorder.PlayHistory import PlayHistory


class LoadBalancerEnv(AbstractEnvironment):
    def __init__(self, server_nb: int = 4, round_nb: int = 3000, noise_std: float = 10.0, drift_std: float = 1.0,
                 init_low: float = 50.0, init_high: float = 200.0, latency_low: float = 10.0,
                 latency_high: float = 500.0, latency_floor: float = 1.0,
                 true_latencies: Optional[Collection[float]] = None, display: bool = False) -> None:
        assert type(round_nb) == int and round_nb > 0, f"round_nb should be a positive int, get {round_nb}"
        self.server_nb = len(true_latencies) if true_latencies is not None else server_nb
        assert self.server_nb > 0, f"server_nb should be > 0. Current value:{self.server_nb}"
        self.round_nb = round_nb
        self.horizon = round_nb
        self.noise_std = noise_std
        self.drift_std = drift_std
        self.init_low = init_low
        self.init_high = init_high
        self.latency_low = latency_low
        self.latency_high = latency_high
        self.latency_floor = latency_floor
        self.true_latencies = copy.deepcopy(true_latencies)
        self.servers: Optional[ServerPool] = None
        self.history = PlayHistory()
        self.display = display

        self.action_space = self.server_nb

    def env_snap(self, keys: Union[list[str], None] = None) -> dict:
        dict_env_snap_ = dict(vars(self))
        dict_env_snap_["true_latencies"] = self.get_true_latencies() if self.servers is not None else None
        if keys is None:
            keys = list(dict_env_snap_.keys())
            keys_to_remove = ["servers", "history"]
            keys = list(set(keys) - set(keys_to_remove))
        dict_env_snap = {key: copy.deepcopy(dict_env_snap_[key]) for key in keys}
        return dict_env_snap

    def reset_horizon(self) -> None:
        self.horizon = self.round_nb

    def reset(self, rng: np.random.Generator) -> list[float]:
        self.servers = ServerPool(
            rng=rng,
            server_nb=self.server_nb,
            true_latencies=self.true_latencies,
            noise_std=self.noise_std,
            drift_std=self.drift_std,
            init_low=self.init_low,
            init_high=self.init_high,
            latency_low=self.latency_low,
            latency_high=self.latency_high,
            latency_floor=self.latency_floor,
        )
        self.reset_horizon()
        self.history = PlayHistory()
        return self.get_true_latencies()

    def get_servers(self) -> ServerPool:
        assert self.servers is not None, "Env should be reset before use"
        return self.servers

    def get_true_latencies(self) -> list[float]:
        return self.get_servers().get_true_latencies()

    def step(self, action: Union[int, np.integer]) -> tuple[float, float, bool]:
        servers = self.get_servers()
        action_ = int(action)
        assert 0 <= action_ < self.server_nb, f"action should be in [0, {self.server_nb}), get {action_}"

        if self.display:
            print(f"Sending request to server: {action_}")

        # Ground truth is read before the observation, no random draw involved
        true_latency = servers.get_true_latencies()[action_]
        best_true_latency = servers.get_min_true_latency()

        latency = servers.observe(action_)
        reward = -latency
        self.horizon -= 1
        done = True if self.horizon <= 0 else False

        self.history.update(action_, latency, reward, true_latency, best_true_latency)
        logging.debug(f"Server {action_} answered in {latency:.2f} ms (true {true_latency:.2f} ms)")

        if self.display and done:
            self.display_history()

        return latency, reward, done

    def drift(self) -> list[float]:
        return self.get_servers().drift()

    def render(self) -> None:
        print(f"No.{self.round_nb - self.horizon} request, {self.round_nb} requests in total, "
              f"Horizon: {self.horizon}")
        self.get_servers().display()

    def display_history(self) -> None:
        summary = self.history.get_summary()
        logging.info(f"Best server now: {self.get_servers().get_best_server()}, true latencies:"
                     f"{np.around(self.get_true_latencies(), decimals=1)}, best pick rate: "
                     f"{summary['best_pick_rate']:.3f}, regret: {summary['regret']:.1f}")
        print(f"Best server now: {self.get_servers().get_best_server()}, true latencies:"
              f"{np.around(self.get_true_latencies(), decimals=1)}, best pick rate: "
              f"{summary['best_pick_rate']:.3f}, regret: {summary['regret']:.1f}")

    def get_action_space(self) -> int:
        return self.action_space

    def get_play_history(self) -> PlayHistory:
        return self.history

    def export_history_to_csv(self, result, path: str) -> None:
        """
        Append the per-request trace of a finished run to a csv file

        :param result: SingleResult of the run
        :param path: target csv file, the header is written only when the file is created
        :return:
        """
        fieldnames = [
            "agent_name",
            "seed",
            "step",
            "server",
            "latency",
            "reward",
            "q_value",
            "true_latency",
            "best_true_latency",
        ]
        file_exist = os.path.isfile(path)
        history = result.get_history()
        summary = result.get_summary_dict()
        rows = [
            {"agent_name": summary["agent_name"], "seed": summary["seed"],
             "step": step + 1, "server": action, "latency": latency, "reward": reward,
             "q_value": q_value, "true_latency": true_latency, "best_true_latency": best_true_latency}
            for step, (action, latency, reward, q_value, true_latency, best_true_latency) in enumerate(
                zip(history.actions, history.latencies, history.rewards, history.q_values,
                    history.true_latencies, history.best_true_latencies))]

        with open(path, 'a' if file_exist else 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            if not file_exist:
                writer.writeheader()
            writer.writerows(rows)
        logging.info(f"History of {len(rows)} requests exported to {path}")
