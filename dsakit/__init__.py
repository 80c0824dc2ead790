"""Classic data structures and algorithms: sorting, searching, stacks,
linked lists, queues, trees, hash tables, graphs, and greedy, dynamic
and divide-and-conquer algorithms."""

__version__ = "0.1.0"