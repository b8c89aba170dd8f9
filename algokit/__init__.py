"""Algorithms and data structures: containers, range queries, graphs, number theory, geometry and strings."""

__version__ = "0.1.0"