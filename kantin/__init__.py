"""Canteen ordering: stock-tracked menu, customer queue with history, and a paid cart."""

__version__ = "0.1.0"