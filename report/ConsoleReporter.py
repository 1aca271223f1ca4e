import logging

from typing_extensions import override

from report.abstract.Reporter import AbstractReporter


class ConsoleReporter(AbstractReporter):
    """
    Writes run reports as text lines. Non-empty lines go to the log, every line to stdout when display is on.
    """
    def __init__(self, display=True):
        self.display = display

    def _emit(self, line=""):
        if line:
            logging.info(line)
        if self.display:
            print(line)

    @override
    def report_initial(self, true_latencies):
        self._emit("Initial true latencies (ms):")
        for k, latency in enumerate(true_latencies):
            self._emit(f"  Server-{k}: {latency:.1f} ms")
        self._emit()

    @override
    def report_progress(self, snapshot):
        self._emit(f"--- Step {snapshot.step} | Average latency: {snapshot.get_average_latency():.1f} ms ---")
        for k in range(len(snapshot.q_values)):
            self._emit(f"  Server-{k} | Latency estimate: {-snapshot.q_values[k]:5.1f} ms "
                       f"| Probability: {snapshot.probabilities[k] * 100:4.1f}% "
                       f"| Selected: {snapshot.selection_counts[k]}")
        self._emit()

    @override
    def report_final(self, result):
        self._emit("==========================================")
        self._emit("  RESULTS")
        self._emit("==========================================")
        self._emit(f"  Total steps     : {result.steps}")
        self._emit(f"  Total reward    : {result.total_reward:.0f}")
        self._emit(f"  Average latency : {result.get_average_latency():.2f} ms")
        self._emit()
        self._emit("  Server usage:")
        shares = result.get_selection_shares()
        for k, count in enumerate(result.selection_counts):
            self._emit(f"    Server-{k}: {count} requests ({shares[k]:.1f}%)")
        self._emit()
        self._emit("  Final softmax probabilities:")
        for k, probability in enumerate(result.probabilities):
            self._emit(f"    Server-{k}: {probability * 100:.2f}%")
