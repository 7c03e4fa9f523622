"""Summary statistics for GPX activity recordings."""

__version__ = "0.1.0"
