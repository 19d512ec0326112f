"""Demonstration driver for PageTree.

Builds a small product/services site with timestamps offset from "now",
then prints breadcrumbs, tag searches and recency results.

Usage:
    python -m pagetree.demo          # demo output only
    python -m pagetree.demo -vv      # plus DEBUG logging on stderr
"""

import argparse
import logging
import sys
from datetime import timedelta
from typing import Dict, List, Optional

from .adapters.pages import Page
from .clock import Clock, FixedClock, SYSTEM_CLOCK
from .api import add_child, breadcrumb, search_by_tag, recently_modified

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def _configure_logging(verbosity: int) -> None:
    """Configure the ``pagetree`` logger from a -v count.

    Only the package logger is touched; the root logger is left alone.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("pagetree")
    app_logger.setLevel(level)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        app_logger.addHandler(handler)
    for handler in app_logger.handlers:
        handler.setLevel(level)


def build_sample_tree(clock: Clock = SYSTEM_CLOCK) -> Dict[str, Page]:
    """Build the sample site.

    Structure (age relative to ``clock.now()``):
    Home (now)
    ├── Products (2 days)
    │   └── Laptops (3 days)
    │       ├── Gaming Laptops (8 days)
    │       └── Business Laptops (18 days)
    └── Services (1 day)
        └── Support (now)

    Returns:
        Pages keyed by lower-case short name ("home", "products", ...)
    """
    now = clock.now()

    def page(title: str, path: str, tags: List[str], age_days: int) -> Page:
        return Page(title, path, tags, now - timedelta(days=age_days), clock=clock)

    pages = {
        'home': page("Home", "/", ["main", "homepage"], 0),
        'products': page("Products", "/products", ["catalog", "products"], 2),
        'laptops': page("Laptops", "/products/laptops",
                        ["computers", "laptops", "electronics"], 3),
        'gaming': page("Gaming Laptops", "/products/laptops/gaming",
                       ["gaming", "laptops", "high-performance"], 8),
        'business': page("Business Laptops", "/products/laptops/business",
                         ["business", "laptops", "professional"], 18),
        'services': page("Services", "/services", ["support", "services"], 1),
        'support': page("Support", "/services/support",
                        ["help", "support", "technical"], 0),
    }

    add_child(pages['home'], pages['products'])
    add_child(pages['home'], pages['services'])
    add_child(pages['products'], pages['laptops'])
    add_child(pages['laptops'], pages['gaming'])
    add_child(pages['laptops'], pages['business'])
    add_child(pages['services'], pages['support'])

    logger.info("Built sample tree with %d pages", len(pages))
    return pages


def run_demo(pages: Dict[str, Page], clock: Clock = SYSTEM_CLOCK) -> None:
    """Print breadcrumb, tag search and recency results for the sample tree."""
    home = pages['home']

    print("Testing CMS Content Repository Simulator")
    print("========================================")

    print("\nBreadcrumb tests:")
    print(f"Gaming page: {breadcrumb(pages['gaming'])}")
    print(f"Support page: {breadcrumb(pages['support'])}")

    for tag in ("laptops", "support"):
        print(f"\nSearching for '{tag}' tag:")
        for found in search_by_tag(home, tag):
            print(f"Found: {found.title}")

    for days in (3, 15):
        print(f"\nPages modified in last {days} days:")
        for recent in recently_modified(home, days, clock=clock):
            print(f"{recent.title} - {recent.last_modified.strftime(TIMESTAMP_FORMAT)}")


def default_clock() -> FixedClock:
    """Freeze the system clock so the tree and its queries share one "now".

    Day boundaries stay on the local zone's rules for each day, so a DST
    change inside the queried window does not shift the cutoff.
    """
    return FixedClock(SYSTEM_CLOCK.now(), local_days=True)


def main(argv: Optional[List[str]] = None, clock: Optional[Clock] = None) -> int:
    """Entry point for ``python -m pagetree.demo`` and ``pagetree-demo``.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        clock: Clock to build and query the tree with; the system clock by
            default. Tests pass a FixedClock.

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        prog="pagetree-demo",
        description="Build a sample page tree and run breadcrumb, tag and recency queries.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v INFO, -vv DEBUG)")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    clock = clock or default_clock()
    pages = build_sample_tree(clock)
    run_demo(pages, clock)
    return 0


if __name__ == "__main__":
    sys.exit(main())
