"""Clustering Visualizer - compare clustering algorithms on 2-D datasets with AI commentary.

The four algorithms are simulated: labels come from simple heuristics and the
quality metrics are random, for illustration only.
"""

__version__ = "1.0.0"

__all__ = []
