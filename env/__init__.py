"""Simulated server environments with hidden, drifting latencies."""
