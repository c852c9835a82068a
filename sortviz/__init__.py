"""Step-by-step visualizer for classic sorting algorithms, with a pygame window."""

__version__ = "0.1.0"