"""Cross-cutting application concerns."""

from contributor_hub.core.logging import setup_logging

__all__ = ["setup_logging"]
