import matplotlib.pyplot as plt # type: ignore
import numpy as np
from functools import wraps
import logging
import time
import os
from typing import Callable, Optional, TypeVar

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
T = TypeVar('T')


def func_timer(func: Callable[..., T]) -> Callable[..., T]:
    @wraps(func)
    def func_timer_wrapper(*args, **kwargs) -> T:
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        total_time = end_time - start_time
        logging.info(f'Function {func.__name__} took {total_time:.4f} seconds')
        return result

    return func_timer_wrapper


def get_root_dir() -> str:
    return ROOT_DIR


def q_value_traces(history, server_nb: int) -> list[list[float]]:
    """
    Rebuild, for each server, the latency estimate (-Q) after every request.

    Only the chosen server's estimate changes on a request, the others keep their
    last value. Estimates start at 0.
    """
    traces = [[] for _ in range(server_nb)]
    current = [0.0 for _ in range(server_nb)]
    for action, q_value in zip(history.actions, history.q_values):
        if q_value is not None:
            current[action] = -q_value
        for k in range(server_nb):
            traces[k].append(current[k])
    return traces


def plot_q_values(history, server_nb: int, path: str = 'results/q_values.png', title: Optional[str] = None,
                  show: bool = False) -> None:
    traces = q_value_traces(history, server_nb)
    plt.figure(figsize=(10, 7))
    for k in range(server_nb):
        plt.plot(range(1, len(traces[k]) + 1), traces[k], label=f"Server-{k} estimate")
    plt.plot(range(1, len(history.best_true_latencies) + 1), history.best_true_latencies, 'k--',
             label="Best true latency")
    if title is not None:
        plt.title(title)
    plt.xlabel("Request", fontsize=22)
    plt.ylabel("Latency (ms)", fontsize=22)
    plt.legend()
    plt.savefig(path)
    if show:
        plt.show()
    plt.close()


def plot_selection_share(result, path: str = 'results/selection_share.png', title: Optional[str] = None,
                         show: bool = False) -> None:
    shares = result.get_selection_shares()
    plt.figure(figsize=(10, 7))
    plt.bar(np.arange(len(shares)), shares, color="c")
    plt.xticks(range(len(shares)), [f"Server-{k}" for k in range(len(shares))])
    if title is not None:
        plt.title(title)
    plt.xlabel("Server", fontsize=22)
    plt.ylabel("Requests (%)", fontsize=22)
    plt.savefig(path)
    if show:
        plt.show()
    plt.close()
