"""Tree traversal strategies for PageTree.

Traversers implement different algorithms for walking through trees.
They work with any TreeAdapter and never recurse, so a pathologically deep
tree cannot exhaust the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Deque, List, Set, Tuple
from collections import deque
from .node import TreeNode
from .adapter import TreeAdapter, TreeCycleError


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers implement the algorithms for walking through trees in
    different orders. They are independent of the tree structure, working
    through the TreeAdapter.

    A node reachable more than once (the same page added twice) is yielded
    once per occurrence. A node reachable from itself is a cycle and raises
    TreeCycleError.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth

    def _children(self, node: TreeNode, depth: int, max_depth: Optional[int]) -> Iterator[TreeNode]:
        """Children of ``node`` to explore, or nothing past the depth limit."""
        if self._should_explore(depth, max_depth) and not node.is_leaf():
            return iter(self.adapter.get_children(node))
        return iter(())

    @staticmethod
    def _cycle_error(node: TreeNode) -> TreeCycleError:
        return TreeCycleError(f"Node {node.identifier()!r} is its own ancestor")


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before any of its descendants, children in stored order.
    This is the order used by tag search and recency filtering.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree depth-first, pre-order.

        The work stack holds one child iterator per node on the current
        path, so the stack doubles as the ancestor set for cycle checks.
        """
        if self._should_yield(0, min_depth, max_depth):
            yield (root, 0)

        stack: List[Tuple[TreeNode, int, Iterator[TreeNode]]] = [
            (root, 0, self._children(root, 0, max_depth))
        ]
        on_path: Set[int] = {id(root)}

        while stack:
            node, depth, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                on_path.discard(id(node))
                continue

            if id(child) in on_path:
                raise self._cycle_error(child)

            child_depth = depth + 1
            if self._should_yield(child_depth, min_depth, max_depth):
                yield (child, child_depth)

            on_path.add(id(child))
            stack.append((child, child_depth, self._children(child, child_depth, max_depth)))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Useful for aggregating values over a
    subtree, such as the newest modification time below a page.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree depth-first, post-order.

        Yields a node when its child iterator is exhausted.
        """
        stack: List[Tuple[TreeNode, int, Iterator[TreeNode]]] = [
            (root, 0, self._children(root, 0, max_depth))
        ]
        on_path: Set[int] = {id(root)}

        while stack:
            node, depth, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                on_path.discard(id(node))
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            if id(child) in on_path:
                raise self._cycle_error(child)

            on_path.add(id(child))
            stack.append((child, depth + 1, self._children(child, depth + 1, max_depth)))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse tree breadth-first.

        Each queued entry carries its lineage as a linked tuple of node ids.
        The lineage is only walked for a node already seen elsewhere in the
        walk, so a tree without repeated pages is traversed in linear time.
        """
        queue: Deque[Tuple[TreeNode, int, tuple]] = deque([(root, 0, (id(root), ()))])
        seen_ids: Set[int] = {id(root)}

        while queue:
            node, depth, lineage = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            for child in self._children(node, depth, max_depth):
                child_id = id(child)
                if child_id in seen_ids:
                    if self._in_lineage(child_id, lineage):
                        raise self._cycle_error(child)
                else:
                    seen_ids.add(child_id)
                queue.append((child, depth + 1, (child_id, lineage)))

    @staticmethod
    def _in_lineage(node_id: int, lineage: tuple) -> bool:
        while lineage:
            if lineage[0] == node_id:
                return True
            lineage = lineage[1]
        return False


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
