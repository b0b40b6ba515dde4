"""Linked lists, a circular queue, a bounded stack, searches and CPU scheduling simulations."""

__version__ = "0.1.0"