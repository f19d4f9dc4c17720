"""Classic data structures and algorithms: lists, stacks, queues, trees, graphs, shortest paths and sorting."""

__version__ = "0.1.0"