"""Unit tests for traversal strategies.

Tests the explicit-stack traversers against a small page tree, including
depth limits, duplicate children and cycle detection.
"""

import unittest

from pagetree import Page, PageAdapter, TreeCycleError
from pagetree.core.traverser import (
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)


class TestTraversalStrategies(unittest.TestCase):
    """Test different traversal strategies."""

    def setUp(self):
        """Create a test tree structure.

        root
          a
            a1
            a2
          b
            b1
              b1a
            b2
          c
        """
        self.adapter = PageAdapter()
        self.pages = {name: Page(name, f"/{name}") for name in
                      ["root", "a", "a1", "a2", "b", "b1", "b1a", "b2", "c"]}
        p = self.pages
        p["root"].add_child(p["a"])
        p["root"].add_child(p["b"])
        p["root"].add_child(p["c"])
        p["a"].add_child(p["a1"])
        p["a"].add_child(p["a2"])
        p["b"].add_child(p["b1"])
        p["b"].add_child(p["b2"])
        p["b1"].add_child(p["b1a"])
        self.root = p["root"]

    def walk(self, traverser, **kwargs):
        return [(node.title, depth) for node, depth in traverser.traverse(self.root, **kwargs)]

    def test_pre_order(self):
        result = self.walk(DepthFirstPreOrderTraverser(self.adapter))
        self.assertEqual(result, [
            ("root", 0), ("a", 1), ("a1", 2), ("a2", 2),
            ("b", 1), ("b1", 2), ("b1a", 3), ("b2", 2), ("c", 1),
        ])

    def test_post_order(self):
        result = self.walk(DepthFirstPostOrderTraverser(self.adapter))
        self.assertEqual(result, [
            ("a1", 2), ("a2", 2), ("a", 1),
            ("b1a", 3), ("b1", 2), ("b2", 2), ("b", 1), ("c", 1), ("root", 0),
        ])

    def test_breadth_first(self):
        result = self.walk(BreadthFirstTraverser(self.adapter))
        self.assertEqual(result, [
            ("root", 0), ("a", 1), ("b", 1), ("c", 1),
            ("a1", 2), ("a2", 2), ("b1", 2), ("b2", 2), ("b1a", 3),
        ])

    def test_max_depth(self):
        for traverser_class in (DepthFirstPreOrderTraverser,
                                DepthFirstPostOrderTraverser,
                                BreadthFirstTraverser):
            with self.subTest(traverser=traverser_class.__name__):
                result = self.walk(traverser_class(self.adapter), max_depth=1)
                self.assertEqual(sorted(result), [("a", 1), ("b", 1), ("c", 1), ("root", 0)])

    def test_min_depth(self):
        result = self.walk(DepthFirstPreOrderTraverser(self.adapter), min_depth=2)
        self.assertEqual([title for title, _ in result], ["a1", "a2", "b1", "b1a", "b2"])

    def test_duplicates_yielded_per_occurrence(self):
        self.pages["c"].add_child(self.pages["a1"])
        self.pages["c"].add_child(self.pages["a1"])

        for traverser_class in (DepthFirstPreOrderTraverser,
                                DepthFirstPostOrderTraverser,
                                BreadthFirstTraverser):
            with self.subTest(traverser=traverser_class.__name__):
                titles = [title for title, _ in self.walk(traverser_class(self.adapter))]
                self.assertEqual(titles.count("a1"), 3)

    def test_cycle_detected_by_every_strategy(self):
        self.pages["b1a"].add_child(self.root)

        for traverser_class in (DepthFirstPreOrderTraverser,
                                DepthFirstPostOrderTraverser,
                                BreadthFirstTraverser):
            with self.subTest(traverser=traverser_class.__name__):
                with self.assertRaises(TreeCycleError):
                    self.walk(traverser_class(self.adapter))

    def test_self_loop_detected(self):
        lonely = Page("lonely", "/lonely")
        lonely.add_child(lonely)

        with self.assertRaises(TreeCycleError):
            list(DepthFirstPreOrderTraverser(self.adapter).traverse(lonely))

    def test_self_loop_detected_breadth_first(self):
        lonely = Page("lonely", "/lonely")
        lonely.add_child(lonely)

        with self.assertRaises(TreeCycleError):
            list(BreadthFirstTraverser(self.adapter).traverse(lonely))

    def test_cycle_through_repeated_page_detected_breadth_first(self):
        # a1 appears twice under a, and a1 loops back to a
        self.pages["a"].add_child(self.pages["a1"])
        self.pages["a1"].add_child(self.pages["a"])

        walk = BreadthFirstTraverser(self.adapter).traverse(self.root)
        with self.assertRaises(TreeCycleError):
            for _ in range(50):
                next(walk)

    def test_mutation_after_start_does_not_affect_current_walk(self):
        walk = DepthFirstPreOrderTraverser(self.adapter).traverse(self.root)
        next(walk)  # root
        next(walk)  # a
        next(walk)  # a1; a's children are now being iterated
        self.pages["a"].add_child(Page("late", "/late"))

        titles = [node.title for node, _ in walk]
        self.assertNotIn("late", titles)


class TestTraverserFactory(unittest.TestCase):
    """Test create_traverser name lookup."""

    def test_known_names(self):
        adapter = PageAdapter()
        self.assertIsInstance(create_traverser("dfs_pre", adapter), DepthFirstPreOrderTraverser)
        self.assertIsInstance(create_traverser("Depth_First_Post", adapter), DepthFirstPostOrderTraverser)
        self.assertIsInstance(create_traverser("BFS", adapter), BreadthFirstTraverser)

    def test_unknown_name(self):
        with self.assertRaises(ValueError) as ctx:
            create_traverser("zigzag", PageAdapter())
        self.assertIn("zigzag", str(ctx.exception))


class TestAdapterNavigation(unittest.TestCase):
    """Test the PageAdapter helpers used by traversers and collectors."""

    def setUp(self):
        self.adapter = PageAdapter()
        self.home = Page("Home", "/")
        self.products = Page("Products", "/products")
        self.services = Page("Services", "/services")
        self.laptops = Page("Laptops", "/products/laptops")
        self.home.add_child(self.products)
        self.home.add_child(self.services)
        self.products.add_child(self.laptops)

    def test_ancestors(self):
        self.assertEqual(self.adapter.get_ancestors(self.laptops),
                         [self.home, self.products, self.laptops])
        self.assertEqual(self.adapter.get_ancestors(self.laptops, include_self=False),
                         [self.home, self.products])
        self.assertEqual(self.adapter.get_ancestors(self.home), [self.home])

    def test_depth(self):
        self.assertEqual(self.adapter.get_depth(self.laptops), 2)

    def test_siblings(self):
        self.assertEqual(list(self.adapter.get_siblings(self.products)), [self.services])
        self.assertEqual(list(self.adapter.get_siblings(self.home)), [])

    def test_estimated_size(self):
        self.assertEqual(self.adapter.estimated_size(self.home), 4)
        self.assertEqual(self.adapter.estimated_size(self.laptops), 1)

    def test_add_child_through_adapter(self):
        blog = Page("Blog", "/blog")
        self.adapter.add_child(self.home, blog)
        self.assertIs(blog.parent, self.home)
        self.assertEqual(self.home.children[-1], blog)


if __name__ == "__main__":
    unittest.main()
