"""Execution planning for PageTree.

The ExecutionPlan validates a TraversalConfig against a TreeAdapter and
coordinates the actual traversal: traverser, filters, collector and result
limit.
"""

import logging
from typing import Iterator, Tuple, Any, Dict
from .core.node import TreeNode
from .core.adapter import TreeAdapter
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import (
    DataCollector,
    IdentifierCollector,
    MetadataCollector,
    FullNodeCollector,
    BreadcrumbCollector,
)
from .config import TraversalConfig, DataRequirement, TraversalStrategy

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a traversal configuration is inconsistent."""
    pass


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between caller intent (TraversalConfig)
    and execution. All configuration problems are reported together, before
    any node is visited.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Tree adapter for the specific tree type

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_visited = 0
        self.nodes_yielded = 0

        logger.debug("Built execution plan: %s", self.get_summary())

    def _select_traverser(self) -> TreeTraverser:
        """Select appropriate traverser based on configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        return create_traverser(self.config.strategy.value, self.adapter)

    def _select_collector(self) -> DataCollector:
        """Select appropriate data collector based on requirements."""
        requirement = self.config.data_requirements
        if requirement == DataRequirement.CUSTOM:
            return self.config.custom_collector
        if requirement == DataRequirement.BREADCRUMB:
            return BreadcrumbCollector(self.adapter, self.config.breadcrumb_separator)

        collector_map = {
            DataRequirement.IDENTIFIER_ONLY: IdentifierCollector,
            DataRequirement.METADATA: MetadataCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
        }
        return collector_map[requirement](self.adapter)

    def execute(self, root: TreeNode) -> Iterator[Tuple[TreeNode, Any]]:
        """Execute the traversal plan.

        Filters select what is yielded; every node within the depth limit is
        still visited, so descendants of a rejected node can match.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_visited = 0
        self.nodes_yielded = 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            self.nodes_visited += 1

            if not self.config.depth.should_yield(depth):
                continue
            if not self.config.filter.should_include(node):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_yielded += 1
            yield (node, data)

            if (self.config.max_results is not None
                    and self.nodes_yielded >= self.config.max_results):
                logger.debug("Stopping after %d results", self.nodes_yielded)
                break

        logger.debug(
            "Traversal from %r visited %d nodes, yielded %d",
            root.identifier(), self.nodes_visited, self.nodes_yielded,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_results': self.config.max_results,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
