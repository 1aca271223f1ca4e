import sys
import os
import logging
from pathlib import Path

# Ensure project root is in sys.path so imports like `agent.*` and `env.*` work
# when running this script directly. The project root is 2 parents
# above this file: (.../run_script/softmax/run_softmax_load_balancer.py).
project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from env.LoadBalancerEnv import LoadBalancerEnv
from agent.algo.SoftmaxLoadBalancer import SoftmaxLoadBalancer
from run_script.utils import prepare_results_directory
from utils.utils import func_timer, plot_q_values, plot_selection_share

# TEST_DIR will be set in main(); keep as None so importing this module
# doesn't create directories or start the simulation.
TEST_DIR = None

K = 4               # Number of servers
STEPS = 3000        # Number of requests
ALPHA = 0.1         # Step size of the value update
TAU = 20.0          # Softmax temperature
DRIFT_STD = 1.0     # Random walk of the true latencies (ms)
NOISE_STD = 10.0    # Measurement noise (ms)
SEED = 42
REPORT_INTERVAL = 500
display = True

env_config = {
    "server_nb": K,
    "round_nb": STEPS,
    "noise_std": NOISE_STD,
    "drift_std": DRIFT_STD,
}

agent_config = {
    "server_nb": K,
    "tau": TAU,
    "alpha": ALPHA,
}


def _ensure_test_dirs_and_logging():
    """Create plots dir and configure logging when TEST_DIR is available."""
    global TEST_DIR
    if TEST_DIR is None:
        return

    plot_dir_path = os.path.join(TEST_DIR, 'plots')
    os.makedirs(plot_dir_path, exist_ok=True)

    log_path = os.path.join(TEST_DIR, 'record.log')
    logging.basicConfig(filename=log_path, level=logging.DEBUG)


@func_timer
def run(env, agent):
    return agent.single_test(env, seed=SEED, report_interval=REPORT_INTERVAL, display=display)


def main():
    global TEST_DIR

    # Prepare results directory and configure logging/plots
    TEST_DIR = prepare_results_directory()
    _ensure_test_dirs_and_logging()

    print("=== Softmax Load Balancer Simulation ===\n")

    env = LoadBalancerEnv(**env_config)
    agent = SoftmaxLoadBalancer(**agent_config)
    result = run(env, agent)

    env.export_history_to_csv(result, os.path.join(TEST_DIR, 'history.csv'))
    plot_dir_path = os.path.join(TEST_DIR, 'plots')
    plot_q_values(result.get_history(), K, path=os.path.join(plot_dir_path, 'q_values.png'),
                  title=f"Latency estimates, tau={TAU}, alpha={ALPHA}")
    plot_selection_share(result, path=os.path.join(plot_dir_path, 'selection_share.png'))
    logging.info(f'Results saved at: {TEST_DIR}')


if __name__ == '__main__':
    main()
