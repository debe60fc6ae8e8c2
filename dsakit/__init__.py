"""Classic data structures and algorithms: searching, sorting, stacks, queues,
linked lists, polynomials, sparse matrices, graphs, greedy and dynamic programming."""

__version__ = "0.1.0"