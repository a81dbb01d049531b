"""Order Browser: search, filter, sort and page through order records."""

__version__ = "1.0.0"
