"""Lister catalog service for application and environment metadata."""

__version__ = "1.0.0"
