"""Classic sorting algorithms, a singly linked list, stacks, queues and bracket matching."""

__version__ = "0.1.0"
__all__ = ["linked_list", "parentheses", "queues", "sorting", "stacks"]