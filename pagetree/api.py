"""High-level API for PageTree.

This module provides simple, functional interfaces for the common page tree
operations. These functions wrap the object-oriented API (Page,
ExecutionPlan) for ease of use in simple cases.
"""

from typing import Iterator, Optional, Callable, Any, Union, Tuple, List
from .adapters.pages import Page, PageAdapter, recency_cutoff
from .clock import Clock
from .config import (
    BREADCRUMB_SEPARATOR,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import ExecutionPlan


def add_child(parent: Page, child: Optional[Page]) -> None:
    """Append ``child`` to ``parent`` and set its parent link.

    ``None`` is a no-op. See ``Page.add_child`` for the re-parenting caveat.
    """
    parent.add_child(child)


def breadcrumb(page: Page, separator: str = BREADCRUMB_SEPARATOR) -> str:
    """Root-to-page chain of titles.

    Example:
        >>> breadcrumb(gaming)
        'Home > Products > Laptops > Gaming Laptops'
    """
    return page.breadcrumb(separator)


def search_by_tag(page: Page, tag: str) -> List[Page]:
    """All pages under ``page`` (inclusive) carrying ``tag``, in pre-order."""
    return list(find_nodes(page, lambda node: node.has_tag(tag)))


def recently_modified(page: Page, days: int, clock: Optional[Clock] = None) -> List[Page]:
    """All pages under ``page`` (inclusive) modified after midnight ``days`` days ago.

    Args:
        page: Root of the subtree to search
        days: Non-negative number of days
        clock: Clock to read "now" from; defaults to the page's clock

    Returns:
        Matching pages in pre-order
    """
    cutoff = recency_cutoff(days, clock or page.clock)
    return list(find_nodes(page, lambda node: node.last_modified > cutoff))


def traverse_tree(
    root: Page,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Page], bool]] = None,
    exclude_filter: Optional[Callable[[Page], bool]] = None,
    max_results: Optional[int] = None,
) -> Iterator[Page]:
    """Simple interface for page tree traversal.

    Args:
        root: Starting page for traversal
        strategy: Traversal strategy (dfs_pre, dfs_post, bfs)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding pages
        include_filter: Function to determine if a page should be included
        exclude_filter: Function to determine if a page should be excluded
        max_results: Stop after this many pages

    Yields:
        Pages that match the criteria

    Example:
        >>> for page in traverse_tree(home, max_depth=1):
        ...     print(page.title)
    """
    for page, _ in collect_tree_data(
        root,
        DataRequirement.FULL_NODE,
        strategy=strategy,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        max_results=max_results,
    ):
        yield page


def collect_tree_data(
    root: Page,
    data_requirement: DataRequirement = DataRequirement.METADATA,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Page], bool]] = None,
    exclude_filter: Optional[Callable[[Page], bool]] = None,
    max_results: Optional[int] = None,
) -> Iterator[Tuple[Page, Any]]:
    """Traverse the tree and collect the requested data for each page.

    Yields:
        Tuples of (page, collected_data)

    Example:
        >>> for page, meta in collect_tree_data(home):
        ...     print(meta['path'], meta['tags'])
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
        ),
        data_requirements=data_requirement,
        max_results=max_results,
    )
    plan = ExecutionPlan(config, PageAdapter())
    yield from plan.execute(root)


def find_nodes(
    root: Page,
    predicate: Callable[[Page], bool],
    **kwargs
) -> Iterator[Page]:
    """Find pages that match a predicate, in pre-order by default.

    Args:
        root: Starting page
        predicate: Function that returns True for matching pages
        **kwargs: Traversal options (see traverse_tree)
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def count_nodes(root: Page, **kwargs) -> int:
    """Count pages in a tree that match criteria (see traverse_tree)."""
    return sum(1 for _ in traverse_tree(root, **kwargs))


def get_breadcrumbs(root: Page, **kwargs) -> Iterator[Tuple[Page, str]]:
    """Pair every page of the tree with its breadcrumb.

    Args:
        root: Starting page
        **kwargs: Traversal options (see collect_tree_data)

    Yields:
        Tuples of (page, breadcrumb)
    """
    yield from collect_tree_data(root, DataRequirement.BREADCRUMB, **kwargs)


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from enum or string."""
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategy_map:
        raise ValueError(f"Unknown strategy: {strategy}")

    return strategy_map[strategy_lower]
