"""Graph, grid and sequence algorithms for classic programming puzzles."""

__version__ = "0.1.0"
__all__ = ["graphs", "grids", "sequences"]