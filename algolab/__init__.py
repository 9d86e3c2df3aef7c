"""Classic algorithms for study: graphs, sorting, dynamic programming, search and growth-rate tables."""

__version__ = "0.1.0"