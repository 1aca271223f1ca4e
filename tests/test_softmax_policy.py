import numpy as np
import pytest

from agent.policy.SoftmaxPolicy import ProbabilityUnderflowError, SoftmaxPolicy, softmax


@pytest.mark.parametrize("q_values", [
    [0.0, 0.0, 0.0, 0.0],
    [-120.0, -80.0, -100.0, -60.0],
    [-1e6, -1.0, -3e5, -500.0],
    [1e300, -1e300, 0.0],
    [-42.0],
])
@pytest.mark.parametrize("tau", [1e-3, 1.0, 20.0, 1e6])
def test_probabilities_are_a_distribution(q_values, tau):
    probs = softmax(q_values, tau)
    assert probs.shape == (len(q_values),)
    assert np.all(probs >= 0)
    assert np.sum(probs) == pytest.approx(1.0, abs=1e-9)


def test_order_is_preserved():
    q_values = [-120.0, -80.0, -100.0, -60.0]
    probs = softmax(q_values, 20.0)
    for i in range(len(q_values)):
        for j in range(len(q_values)):
            if q_values[i] > q_values[j]:
                assert probs[i] > probs[j]


def test_equal_values_give_uniform():
    probs = softmax([-75.5] * 5, 20.0)
    assert probs == pytest.approx(np.full(5, 1 / 5), abs=1e-12)


def test_temperature_limits():
    q_values = [-120.0, -80.0, -100.0, -60.0]
    hot = softmax(q_values, 1e9)
    assert hot == pytest.approx(np.full(4, 0.25), abs=1e-6)

    cold = softmax(q_values, 1e-3)
    assert cold[3] == pytest.approx(1.0, abs=1e-9)
    assert np.sum(cold[:3]) == pytest.approx(0.0, abs=1e-9)


def test_large_values_do_not_overflow():
    probs = softmax([1e5, 1e5 - 20.0], 1.0)
    assert np.all(np.isfinite(probs))
    assert probs[0] > probs[1]


def test_non_finite_values_are_rejected():
    with pytest.raises(ValueError):
        softmax([0.0, np.nan], 20.0)
    with pytest.raises(ValueError):
        softmax([0.0, np.inf], 20.0)


def test_underflow_error_message():
    assert "0.0" in str(ProbabilityUnderflowError(0.0))


def test_new_policy_is_uniform():
    policy = SoftmaxPolicy(server_nb=4, tau=20.0)
    assert policy.get_q_values() == pytest.approx(np.zeros(4))
    assert policy.probabilities() == pytest.approx(np.full(4, 0.25))


def test_select_always_returns_valid_index():
    policy = SoftmaxPolicy(server_nb=4, tau=20.0)
    policy.reset(np.random.default_rng(0))
    policy.q_values = np.array([-120.0, -80.0, -100.0, -60.0])
    picks = [policy.select() for _ in range(2000)]
    assert all(0 <= pick < 4 for pick in picks)
    counts = np.bincount(picks, minlength=4)
    # Highest Q is picked most often
    assert np.argmax(counts) == 3


class _FixedDraw:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_select_walks_cumulative_sum():
    policy = SoftmaxPolicy(server_nb=4, tau=20.0)
    # Uniform: cumulative sums are 0.25, 0.5, 0.75, 1.0
    policy.reset(_FixedDraw(0.0))
    assert policy.select() == 0
    policy.rng = _FixedDraw(0.25)
    assert policy.select() == 0
    policy.rng = _FixedDraw(0.26)
    assert policy.select() == 1
    policy.rng = _FixedDraw(0.74)
    assert policy.select() == 2


def test_select_falls_back_to_last_server_on_shortfall():
    policy = SoftmaxPolicy(server_nb=3, tau=20.0)
    # A draw above any cumulative sum can only come from rounding
    policy.reset(_FixedDraw(1.5))
    assert policy.select() == 2


def test_select_consumes_one_draw():
    rng_a = np.random.default_rng(7)
    rng_b = np.random.default_rng(7)
    policy = SoftmaxPolicy(server_nb=4)
    policy.reset(rng_a)
    policy.select()
    rng_b.random()
    assert rng_a.random() == rng_b.random()


def test_reset_clears_estimates():
    policy = SoftmaxPolicy(server_nb=2)
    policy.q_values[0] = -50.0
    policy.reset(np.random.default_rng(1))
    assert policy.get_q_values() == pytest.approx(np.zeros(2))


def test_invalid_parameters():
    with pytest.raises(AssertionError):
        SoftmaxPolicy(server_nb=0)
    with pytest.raises(AssertionError):
        SoftmaxPolicy(server_nb=2, tau=0.0)
    with pytest.raises(AssertionError):
        softmax([1.0, 2.0], -1.0)
