"""Upload local files or URLs to a GitHub repository via the Contents API."""

__version__ = "0.1.0"
