"""Command-line client for the CreateOS deployment platform."""

__version__ = "0.1.0"
