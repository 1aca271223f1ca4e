import logging
from abc import ABC

import numpy as np
from tqdm import tqdm

from agent.abstract.AbstractAlgo import AbstractAlgo
from agent.result_recorder.TestResult import TestResult
from agent.result_recorder.SingleResult import SingleResult
from agent.result_recorder.Snapshot import Snapshot
from report.ConsoleReporter import ConsoleReporter


class BaseAlgo(AbstractAlgo, ABC):
    def __init__(self, out_dim=1, *args, **kwargs):
        assert type(out_dim) == int and out_dim > 0, f"out_dim should be a positive int, get {out_dim}"
        self.out_dim = out_dim
        super().__init__(*args, **kwargs)

    def init_single_test(self, rng):
        pass

    def take_snapshot(self, result):
        return Snapshot(
            step=result.steps,
            total_reward=result.total_reward,
            q_values=self.get_q_values(),
            probabilities=self.get_probabilities(),
            selection_counts=result.selection_counts,
        )

    def single_test(self, env, seed=42, reporter=None, report_interval=500, display=True):
        """
        Run the request loop on env for its whole horizon.

        One random generator is built from seed and shared by env and agent, so a
        run is fully determined by the seed and the parameters.
        Per request: choose a server, count it, observe its latency, learn from
        -latency, then let every server drift.
        """
        assert type(report_interval) == int and report_interval > 0, \
            f"report_interval should be a positive int, get {report_interval}"
        assert env.get_action_space() == self.out_dim, \
            f"Agent handles {self.out_dim} servers, env has {env.get_action_space()}"
        reporter = reporter if reporter is not None else ConsoleReporter(display=display)

        rng = np.random.default_rng(seed)
        initial_latencies = env.reset(rng)
        self.init_single_test(rng)
        result = SingleResult(agent_name=self.name, server_nb=self.out_dim, seed=seed,
                              env_snap=env.env_snap())
        logging.info(f"Model name:{self.name}, seed: {seed}, horizon: {env.round_nb}")
        reporter.report_initial(initial_latencies)

        done = False
        while not done:
            action_ = self.choose_action()
            result.update_selection(action_)

            _, reward, done = env.step(action_)
            result.update_reward(reward)

            q_value = self.update(action_, reward)
            env.get_play_history().update_q_value(q_value)

            env.drift()

            if result.steps % report_interval == 0:
                snapshot = self.take_snapshot(result)
                result.update_snapshot(snapshot)
                reporter.report_progress(snapshot)

        result.update_q_values(self.get_q_values())
        result.update_probabilities(self.get_probabilities())
        result.update_history(env.get_play_history())
        reporter.report_final(result)
        logging.info(f"Run finished after {result.steps} requests, total reward: {result.get_total_reward():.1f}")
        return result

    def multi_test(self, env, seeds=(42,), report_interval=500, display=True):
        algo_result = TestResult(self.name)
        for seed in tqdm(seeds, disable=not display):
            run_result = self.single_test(env, seed=seed, report_interval=report_interval, display=False)
            algo_result.update_from_single_result(run_result)

        algo_result.log(display=display)
        return algo_result
