"""Tests for breadcrumb reconstruction."""

import pytest

from pagetree import Page, TreeCycleError, breadcrumb


def build_chain(length):
    """Root plus ``length`` descendants, each the only child of the last."""
    pages = [Page("root", "/")]
    for i in range(length):
        page = Page(f"p{i}", f"/p{i}")
        pages[-1].add_child(page)
        pages.append(page)
    return pages


def test_root_breadcrumb_is_its_title():
    home = Page("Home", "/")
    assert home.breadcrumb() == "Home"
    assert breadcrumb(home) == "Home"


def test_chain_breadcrumb_joins_titles_from_root(site):
    assert site['gaming'].breadcrumb() == "Home > Products > Laptops > Gaming Laptops"
    assert site['support'].breadcrumb() == "Home > Services > Support"
    assert site['home'].breadcrumb() == "Home"


def test_breadcrumb_has_depth_plus_one_titles():
    root, a, b, c = build_chain(3)
    assert c.breadcrumb() == "root > p0 > p1 > p2"
    assert len(c.breadcrumb().split(" > ")) == c.depth + 1


def test_custom_separator(site):
    assert breadcrumb(site['laptops'], separator=" / ") == "Home / Products / Laptops"


def test_breadcrumb_follows_latest_parent():
    home = Page("Home", "/")
    archive = Page("Archive", "/archive")
    post = Page("Post", "/post")
    home.add_child(post)
    archive.add_child(post)

    assert post.breadcrumb() == "Archive > Post"


def test_subtree_root_has_no_ancestors_beyond_itself():
    products = Page("Products", "/products")
    laptops = Page("Laptops", "/products/laptops")
    products.add_child(laptops)

    assert laptops.breadcrumb() == "Products > Laptops"


def test_cyclic_parents_raise():
    a = Page("A", "/a")
    b = Page("B", "/b")
    a.add_child(b)
    b.add_child(a)

    with pytest.raises(TreeCycleError):
        a.breadcrumb()


def test_deep_chain_does_not_recurse():
    pages = build_chain(5000)
    crumb = pages[-1].breadcrumb()

    assert crumb.startswith("root > p0 > p1")
    assert crumb.endswith("p4998 > p4999")
    assert crumb.count(" > ") == 5000


@pytest.mark.slow
def test_very_deep_chain():
    pages = build_chain(100_000)
    assert pages[-1].breadcrumb().count(" > ") == 100_000
