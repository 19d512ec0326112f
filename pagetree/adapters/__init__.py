"""Tree adapters for specific tree structures.

Adapters implement the TreeAdapter interface for different tree types.
"""

from .pages import Page, PageAdapter, recency_cutoff

__all__ = [
    "Page",
    "PageAdapter",
    "recency_cutoff",
]
