"""Short URL service: maps long URLs to sequential numeric short urls."""

__version__ = "0.1.0"
