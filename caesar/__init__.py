"""Undirected multigraphs, cubic graph reduction, edge coloring and diagnostics."""

__version__ = "0.1.0"