"""Sorting algorithms, SDBM hashing, blocking queues, bounded buffers, sorted timers and a metro route planner."""

__version__ = "0.1.0"

__all__ = ["buffer", "hashing", "network", "planner", "queues", "sorting", "timers"]