"""Configuration system for PageTree.

This module defines how callers specify their traversal requirements:
which order to walk in, what data to collect, which pages to keep and
how deep to go.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Set, Any, List


# Literal separator placed between titles in a breadcrumb
BREADCRUMB_SEPARATOR = " > "


class DataRequirement(Enum):
    """Specifies what data is collected alongside each node."""
    IDENTIFIER_ONLY = "identifier"      # Page paths
    METADATA = "metadata"                # Metadata dictionaries
    FULL_NODE = "full"                  # The pages themselves
    BREADCRUMB = "breadcrumb"            # Root-to-node title chain
    CUSTOM = "custom"                    # User-defined collection


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level
    CUSTOM = "custom"               # User-defined traverser


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal.

    Filters decide what is yielded, never what is explored: the descendants
    of a rejected page are still visited.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return bool(self.include_filter(node))

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None            # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if self.specific_depths is not None:
            return depth in self.specific_depths

        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False

        return True


@dataclass
class TraversalConfig:
    """Complete configuration for tree traversal.

    This is the primary way callers specify what they want from a traversal.
    The ExecutionPlan validates it before any node is visited.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Node filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    custom_collector: Optional[Any] = None  # Custom collector instance
    breadcrumb_separator: str = BREADCRUMB_SEPARATOR

    # Stop after this many yielded nodes (None = unlimited)
    max_results: Optional[int] = None

    # Convenience constructors for common configurations

    @classmethod
    def pre_order(cls,
                  include_filter: Optional[Callable[[Any], bool]] = None) -> 'TraversalConfig':
        """Create config for a full pre-order walk returning pages.

        Args:
            include_filter: Optional predicate selecting which pages to return

        Returns:
            TraversalConfig for a filtered pre-order walk
        """
        return cls(
            strategy=TraversalStrategy.DEPTH_FIRST_PRE,
            filter=FilterConfig(include_filter=include_filter),
            data_requirements=DataRequirement.FULL_NODE,
        )

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for shallow scanning.

        Args:
            max_depth: How deep to scan (default 1 = immediate children only)

        Returns:
            TraversalConfig for shallow scanning
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
            data_requirements=DataRequirement.METADATA,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_results is not None and self.max_results <= 0:
            errors.append("max_results must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
