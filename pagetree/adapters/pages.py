"""Page adapter for PageTree.

A Page is one piece of content in a CMS-style tree: it owns its children
and keeps only a weak back-reference to its parent, which is all the
breadcrumb needs.
"""

import logging
import weakref
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional, Dict, Any, Union

from ..clock import Clock, SYSTEM_CLOCK, as_aware
from ..config import BREADCRUMB_SEPARATOR
from ..core.node import TreeNode
from ..core.adapter import TreeAdapter, TreeCycleError
from ..core.traverser import DepthFirstPreOrderTraverser

logger = logging.getLogger(__name__)


class Page(TreeNode):
    """A titled, tagged, timestamped node in a content tree.

    Title and path are fixed at construction. The only mutation is
    ``add_child`` (and ``move_to``, built on it). Accessors for tags and
    children return fresh lists, so callers can never reach the page's
    internal state through them.

    Example:
        >>> home = Page("Home", "/", ["main"])
        >>> products = Page("Products", "/products", ["catalog"])
        >>> home.add_child(products)
        >>> products.breadcrumb()
        'Home > Products'
    """

    def __init__(self,
                 title: str,
                 path: str,
                 tags: Optional[Union[Iterable[str], str]] = None,
                 last_modified: Optional[datetime] = None,
                 clock: Optional[Clock] = None):
        """Initialize a page.

        Args:
            title: Display title
            path: Identifying path, e.g. "/products/laptops" (not checked for uniqueness)
            tags: Labels for search; copied. None means no tags, a bare
                string is a single tag
            last_modified: Modification time; naive values are taken as local
                time. Defaults to ``clock.now()``
            clock: Clock for the default timestamp and for recency queries
        """
        self._title = title
        self._path = path
        if tags is None:
            self._tags: List[str] = []
        elif isinstance(tags, str):
            self._tags = [tags]
        else:
            self._tags = list(tags)
        self._clock = clock or SYSTEM_CLOCK
        if last_modified is None:
            last_modified = self._clock.now()
        self._last_modified = as_aware(last_modified)
        self._children: List['Page'] = []
        self._parent_ref: Optional['weakref.ReferenceType[Page]'] = None

    # Accessors

    @property
    def title(self) -> str:
        return self._title

    @property
    def path(self) -> str:
        return self._path

    @property
    def tags(self) -> List[str]:
        """Copy of the tag list."""
        return list(self._tags)

    @property
    def last_modified(self) -> datetime:
        # datetime is immutable, so handing it out cannot leak state
        return self._last_modified

    @property
    def children(self) -> List['Page']:
        """Copy of the child list, in insertion order."""
        return list(self._children)

    @property
    def parent(self) -> Optional['Page']:
        """The page this one was last added to, if it is still alive."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def depth(self) -> int:
        """Number of ancestors; 0 for a root."""
        return _ADAPTER.get_depth(self)

    # TreeNode interface

    def identifier(self) -> str:
        return self._path

    def is_leaf(self) -> bool:
        return not self._children

    def metadata(self) -> Dict[str, Any]:
        return {
            'title': self._title,
            'path': self._path,
            'tags': list(self._tags),
            'last_modified': self._last_modified,
            'child_count': len(self._children),
        }

    # Tree building

    def add_child(self, child: Optional['Page']) -> None:
        """Append ``child`` and point its parent link at this page.

        ``None`` is ignored. The same page may be added more than once and
        then appears once per addition. A child that already has a parent is
        NOT removed from the old parent's children; only its parent link
        moves. Use ``move_to`` to re-parent cleanly.

        Args:
            child: Page to append
        """
        if child is None:
            return

        previous = child.parent
        if previous is not None and previous is not self:
            logger.debug(
                "Re-pointing parent of %r from %r to %r without detaching",
                child.path, previous.path, self._path,
            )

        self._children.append(child)
        child._parent_ref = weakref.ref(self)
        logger.debug("Added %r under %r (%d children)", child.path, self._path, len(self._children))

    def move_to(self, new_parent: Optional['Page']) -> None:
        """Detach this page from its current parent, then add it to ``new_parent``.

        Every occurrence in the old parent's child list is removed. Passing
        None leaves the page as a detached root.

        Args:
            new_parent: Page to attach to, or None

        Raises:
            TreeCycleError: If ``new_parent`` is this page or one of its
                descendants; the tree is left unchanged
        """
        if new_parent is not None:
            if any(page is self for page in _ADAPTER.get_ancestors(new_parent)):
                raise TreeCycleError(
                    f"Cannot move {self._path!r} under {new_parent.path!r}, "
                    f"which is inside its own subtree"
                )

        old_parent = self.parent
        if old_parent is not None:
            old_parent._children = [c for c in old_parent._children if c is not self]
            logger.debug("Detached %r from %r", self._path, old_parent.path)
        self._parent_ref = None

        if new_parent is not None:
            new_parent.add_child(self)

    # Queries

    def breadcrumb(self, separator: str = BREADCRUMB_SEPARATOR) -> str:
        """Titles from the root down to this page, joined by ``separator``.

        Raises:
            TreeCycleError: If parent links loop
        """
        return separator.join(page.title for page in _ADAPTER.get_ancestors(self))

    def has_tag(self, tag: str) -> bool:
        """Exact, case-sensitive tag membership."""
        return tag in self._tags

    def iter_subtree(self) -> Iterator['Page']:
        """Yield this page and all descendants in pre-order."""
        for page, _ in DepthFirstPreOrderTraverser(_ADAPTER).traverse(self):
            yield page

    def select(self, predicate: Callable[['Page'], bool]) -> List['Page']:
        """Pages of this subtree, in pre-order, for which ``predicate`` holds."""
        return [page for page in self.iter_subtree() if predicate(page)]

    def search_by_tag(self, tag: str) -> List['Page']:
        """Pages of this subtree (including this one) tagged with ``tag``.

        Pre-order, children in insertion order. Empty list when nothing
        matches.
        """
        return self.select(lambda page: page.has_tag(tag))

    def recently_modified(self, days: int, clock: Optional[Clock] = None) -> List['Page']:
        """Pages of this subtree modified after midnight ``days`` days ago.

        The cutoff is the start of the calendar day ``days`` days before
        today, read fresh from the clock on each call. A page counts when
        its timestamp is strictly after the cutoff.

        Args:
            days: Non-negative number of days
            clock: Clock to read "now" from; defaults to this page's clock

        Returns:
            Matching pages in pre-order

        Raises:
            TypeError: If days is not an integer
            ValueError: If days is negative
        """
        cutoff = recency_cutoff(days, clock or self._clock)
        return self.select(lambda page: page.last_modified > cutoff)

    def __str__(self) -> str:
        return f"Page: {self._title} ({self._path}) - Tags: [{', '.join(self._tags)}]"

    def __repr__(self) -> str:
        return f"Page(title={self._title!r}, path={self._path!r})"


def recency_cutoff(days: int, clock: Clock) -> datetime:
    """Start of the calendar day ``days`` days before today, per ``clock``.

    Raises:
        TypeError: If days is not an integer
        ValueError: If days is negative
    """
    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError(f"days must be an integer, got {type(days).__name__}")
    if days < 0:
        raise ValueError(f"days cannot be negative, got {days}")

    cutoff = clock.start_of_day(days)
    logger.debug("Recency cutoff for %d days: %s", days, cutoff.isoformat())
    return cutoff


class PageAdapter(TreeAdapter):
    """Adapter for navigating Page trees.

    Children come straight from the page's owned list; the parent comes
    from its weak back-reference.
    """

    def get_children(self, node: Page) -> Iterator[Page]:
        """Yield children in insertion order, duplicates included."""
        return iter(node.children)

    def get_parent(self, node: Page) -> Optional[Page]:
        return node.parent

    def supports_modification(self) -> bool:
        return True

    def estimated_size(self, node: Page) -> Optional[int]:
        """Exact count of pages in the subtree (one per occurrence)."""
        return sum(1 for _ in DepthFirstPreOrderTraverser(self).traverse(node))

    def add_child(self, parent: Page, child: Page) -> None:
        parent.add_child(child)

    def move_node(self, node: Page, new_parent: Page) -> None:
        node.move_to(new_parent)


_ADAPTER = PageAdapter()
