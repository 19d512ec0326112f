"""Core abstractions for PageTree.

This module contains the fundamental abstract base classes that define
the PageTree architecture.
"""

from .node import TreeNode
from .adapter import TreeAdapter, TreeCycleError
from .traverser import TreeTraverser
from .collector import DataCollector

__all__ = [
    "TreeNode",
    "TreeAdapter",
    "TreeCycleError",
    "TreeTraverser",
    "DataCollector",
]
