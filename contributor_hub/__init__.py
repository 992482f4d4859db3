"""Contributor roster, profiles and commit history for a GitHub repository."""

__version__ = "0.1.0"
