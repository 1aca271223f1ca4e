import csv

import numpy as np
import pytest

from env.LoadBalancerEnv import LoadBalancerEnv
from agent.result_recorder.SingleResult import SingleResult


def _reset_env(**kwargs):
    env = LoadBalancerEnv(**kwargs)
    env.reset(np.random.default_rng(0))
    return env


def test_defaults():
    env = _reset_env()
    assert env.get_action_space() == 4
    assert env.round_nb == 3000
    assert len(env.get_true_latencies()) == 4


def test_reset_returns_initial_latencies():
    env = LoadBalancerEnv()
    initial = env.reset(np.random.default_rng(42))
    assert initial == env.get_true_latencies()
    assert all(50.0 <= latency < 200.0 for latency in initial)


def test_step_returns_latency_reward_and_done():
    env = _reset_env(true_latencies=[100.0, 200.0], round_nb=2)
    latency, reward, done = env.step(0)
    assert latency >= 1.0
    assert reward == -latency
    assert not done
    _, _, done = env.step(1)
    assert done
    history = env.get_play_history()
    assert history.actions == [0, 1]
    assert history.latencies[0] == latency
    assert history.rewards == [-latency for latency in history.latencies]
    assert history.true_latencies == [100.0, 200.0]
    assert history.best_true_latencies == [100.0, 100.0]


def test_step_consumes_one_draw():
    rng = np.random.default_rng(6)
    reference = np.random.default_rng(6)
    env = LoadBalancerEnv(true_latencies=[100.0, 200.0, 300.0])
    env.reset(rng)
    latency, _, _ = env.step(2)
    assert latency == max(1.0, 300.0 + reference.normal(0.0, 10.0))
    assert rng.random() == reference.random()


def test_step_does_not_drift():
    env = _reset_env(true_latencies=[100.0, 200.0])
    env.step(1)
    assert env.get_true_latencies() == [100.0, 200.0]
    env.drift()
    assert env.get_true_latencies() != [100.0, 200.0]


def test_reset_starts_a_fresh_episode():
    env = _reset_env(true_latencies=[100.0, 200.0], round_nb=5)
    env.step(0)
    env.reset(np.random.default_rng(1))
    assert env.horizon == 5
    assert len(env.get_play_history()) == 0


def test_invalid_action():
    env = _reset_env(true_latencies=[100.0, 200.0])
    with pytest.raises(AssertionError):
        env.step(2)
    with pytest.raises(AssertionError):
        env.step(-1)


def test_env_snap_has_no_live_objects():
    env = _reset_env(true_latencies=[100.0, 200.0])
    snap = env.env_snap()
    assert "servers" not in snap and "history" not in snap
    assert snap["true_latencies"] == [100.0, 200.0]
    assert snap["noise_std"] == 10.0


def test_render(capsys):
    env = _reset_env(true_latencies=[100.0], round_nb=3)
    env.step(0)
    env.render()
    out = capsys.readouterr().out
    assert "No.1 request, 3 requests in total" in out
    assert "true_latency: 100.0 ms" in out


def test_export_history_to_csv(tmp_path):
    env = _reset_env(true_latencies=[100.0, 200.0], round_nb=3)
    for action in (0, 1, 0):
        _, reward, _ = env.step(action)
        env.get_play_history().update_q_value(reward * 0.1)
    result = SingleResult(agent_name="SoftmaxLoadBalancer", server_nb=2, seed=42)
    result.update_history(env.get_play_history())

    path = tmp_path / "history.csv"
    env.export_history_to_csv(result, str(path))
    env.export_history_to_csv(result, str(path))

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 6
    assert [row["server"] for row in rows[:3]] == ["0", "1", "0"]
    assert rows[0]["step"] == "1" and rows[2]["step"] == "3"
    assert rows[0]["seed"] == "42"
    assert float(rows[1]["true_latency"]) == 200.0
    assert float(rows[1]["best_true_latency"]) == 100.0
