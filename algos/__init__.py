"""Classic graph, search, pair-sum, factorial and sliding-window algorithms."""

__version__ = "0.1.0"