"""Classic data structures and algorithms: sorting, heaps, hashing, recursion, strings,
bits, backtracking, trees, graphs, greedy and sliding-window techniques, special
matrices, stacks, queues and linked lists."""

__version__ = "0.1.0"