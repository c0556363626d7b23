"""Classic algorithms: knapsack, graph traversal, Strassen multiplication and sorting."""

__version__ = "0.1.0"
__all__ = ["knapsack", "traversal", "matrix", "sorting", "benchmark"]