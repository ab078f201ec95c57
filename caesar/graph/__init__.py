"""Undirected multigraphs, factories, cubic graph reduction and restoring, and edge coloring."""