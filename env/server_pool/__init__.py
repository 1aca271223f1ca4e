"""Simulated pool of candidate servers with drifting hidden latencies."""

from .LatencyServer import LatencyServer
from .ServerPool import ServerPool

__all__ = ["LatencyServer", "ServerPool"]
