"""Streaming CSV reading, a header-addressed table, and Zoom participant report grouping."""

__version__ = "0.1.0"