"""TreeNode abstraction for PageTree.

A TreeNode is a data container. Navigation (children, parent) is exposed
through a TreeAdapter so traversers and collectors never reach into a
concrete node type directly.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class TreeNode(ABC):
    """Abstract base class for nodes in a content tree.

    Nodes are compared by identity. Identifiers are used for display and
    lookup only: two distinct pages may share a path, and the same page may
    legitimately be reachable more than once.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return the identifying string for this node.

        For pages this is the URL-like path. It is not required to be
        unique within a tree.

        Returns:
            str: Identifier for this node
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node currently has no children.

        Returns:
            bool: True if this node has no children, False otherwise
        """
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node.

        Common metadata fields:
        - title: Display name of the node
        - path: Identifying path
        - tags: Labels attached to the node
        - last_modified: Modification timestamp

        Returns:
            Dict[str, Any]: Metadata dictionary (a fresh dict per call)
        """
        pass

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self.identifier()!r})"
