"""Data collection strategies for PageTree.

DataCollectors define what information to extract from nodes during traversal.
This allows the same traversal to collect different data based on requirements.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict
from .node import TreeNode
from .adapter import TreeAdapter
from ..config import BREADCRUMB_SEPARATOR


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    DataCollectors determine what information is extracted from each node
    during traversal, so the same walk can return paths, metadata,
    breadcrumbs or whole nodes.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class IdentifierCollector(DataCollector):
    """Collects only node identifiers (page paths)."""

    def collect(self, node: TreeNode, depth: int) -> str:
        """Return node identifier."""
        return node.identifier()


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        """Return node metadata."""
        return node.metadata()


class FullNodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        """Return the node itself."""
        return node


class BreadcrumbCollector(DataCollector):
    """Collects the root-to-node chain of titles as a breadcrumb string.

    The chain is rebuilt from the adapter's parent links, not from the
    traversal path, so a page reached through a stale parent (see
    ``Page.add_child``) reports the breadcrumb of its current parent.
    """

    def __init__(self, adapter: TreeAdapter, separator: str = BREADCRUMB_SEPARATOR):
        super().__init__(adapter)
        self.separator = separator

    def collect(self, node: TreeNode, depth: int) -> str:
        """Return breadcrumb from root to node."""
        chain = self.adapter.get_ancestors(node)
        return self.separator.join(self._label(ancestor) for ancestor in chain)

    @staticmethod
    def _label(node: TreeNode) -> str:
        # Nodes without a title fall back to their identifier
        title = getattr(node, 'title', None)
        return str(title if title is not None else node.identifier())


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, adapter: TreeAdapter, collect_func: Callable[[TreeNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: TreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node, depth)
