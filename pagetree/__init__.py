"""PageTree - hierarchical content tree for a minimal CMS.

Pages are arranged in a parent/child tree; each page is titled, tagged and
timestamped. The tree answers three questions:

    from pagetree import Page

    home.add_child(products)
    products.breadcrumb()            # "Home > Products"
    home.search_by_tag("laptops")    # tagged pages, pre-order
    home.recently_modified(3)        # pages changed since midnight 3 days ago

The same operations are available as functions in ``pagetree.api``, along
with generic traversal over any TreeAdapter.
"""

__version__ = "0.1.0"

from .core.node import TreeNode
from .core.adapter import TreeAdapter, TreeCycleError
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    IdentifierCollector,
    MetadataCollector,
    FullNodeCollector,
    BreadcrumbCollector,
    CustomCollector,
)
from .adapters.pages import Page, PageAdapter, recency_cutoff
from .clock import Clock, SystemClock, FixedClock
from .config import (
    BREADCRUMB_SEPARATOR,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan, ConfigurationError
from .api import (
    add_child,
    breadcrumb,
    search_by_tag,
    recently_modified,
    traverse_tree,
    collect_tree_data,
    find_nodes,
    count_nodes,
    get_breadcrumbs,
)

__all__ = [
    '__version__',
    # Core
    'TreeNode',
    'TreeAdapter',
    'TreeCycleError',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    'DataCollector',
    'IdentifierCollector',
    'MetadataCollector',
    'FullNodeCollector',
    'BreadcrumbCollector',
    'CustomCollector',
    # Pages
    'Page',
    'PageAdapter',
    'recency_cutoff',
    # Clock
    'Clock',
    'SystemClock',
    'FixedClock',
    # Config
    'BREADCRUMB_SEPARATOR',
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'ExecutionPlan',
    'ConfigurationError',
    # API
    'add_child',
    'breadcrumb',
    'search_by_tag',
    'recently_modified',
    'traverse_tree',
    'collect_tree_data',
    'find_nodes',
    'count_nodes',
    'get_breadcrumbs',
]
