"""HTTP API for the clustering visualizer."""
