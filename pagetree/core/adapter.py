"""TreeAdapter abstraction for PageTree.

The adapter provides navigation for a specific tree structure, decoupling
the node representation from the traversal mechanism. Traversers and
collectors only ever talk to nodes through an adapter.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional
from .node import TreeNode


class TreeCycleError(RuntimeError):
    """Raised when parent or child links loop back on themselves."""
    pass


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree of nodes.

    While TreeNode is just a data container, the adapter knows HOW to
    navigate the specific tree type: which nodes are children (and in what
    order) and which node, if any, is the parent.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Children must be yielded in their stored order. The same child may
        be yielded more than once if it was added more than once.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is a root
        """
        pass

    def get_ancestors(self, node: TreeNode, include_self: bool = True) -> List[TreeNode]:
        """Return the chain of ancestors ordered from the root down.

        Walks the parent links iteratively, so depth is bounded only by
        memory.

        Args:
            node: The node to find ancestors for
            include_self: If True, the node itself ends the list

        Returns:
            List of nodes from the root to ``node``

        Raises:
            TreeCycleError: If the parent links loop back on themselves
        """
        chain = [node]
        seen = {id(node)}
        current = self.get_parent(node)
        while current is not None:
            if id(current) in seen:
                raise TreeCycleError(
                    f"Parent chain of {node.identifier()!r} loops back to "
                    f"{current.identifier()!r}"
                )
            seen.add(id(current))
            chain.append(current)
            current = self.get_parent(current)

        chain.reverse()
        if not include_self:
            chain.pop()
        return chain

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        return len(self.get_ancestors(node)) - 1

    def get_siblings(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get siblings of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding sibling TreeNode instances
        """
        parent = self.get_parent(node)
        if parent is None:
            return
        for child in self.get_children(parent):
            if child is not node:
                yield child

    # Capability flags - adapters declare what they support

    def supports_modification(self) -> bool:
        """Check if adapter supports modifying the tree structure.

        Returns:
            True if tree modification is supported
        """
        return False

    def estimated_size(self, node: TreeNode) -> Optional[int]:
        """Estimate the number of nodes in the subtree.

        Return None if estimation is not possible.

        Args:
            node: Root of subtree to estimate

        Returns:
            Estimated node count or None
        """
        return None

    # Tree modification methods - only required if supports_modification() returns True

    def add_child(self, parent: TreeNode, child: TreeNode) -> None:
        """Add a child node to a parent.

        Args:
            parent: The parent node
            child: The child node to add

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")

    def move_node(self, node: TreeNode, new_parent: TreeNode) -> None:
        """Move a node to a new parent.

        Args:
            node: The node to move
            new_parent: The new parent node

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")
