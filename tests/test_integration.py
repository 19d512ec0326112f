"""Integration tests for the demonstration driver.

Runs the demo end to end against a fixed clock and checks what it prints.
"""

import logging
import subprocess
import sys
from pathlib import Path

import pytest

from pagetree.demo import main


pytestmark = pytest.mark.usefixtures("reset_pagetree_logger")


def test_demo_output(fixed_clock, capsys):
    assert main([], clock=fixed_clock) == 0

    out = capsys.readouterr().out
    lines = out.splitlines()

    assert lines[0] == "Testing CMS Content Repository Simulator"
    assert "Gaming page: Home > Products > Laptops > Gaming Laptops" in lines
    assert "Support page: Home > Services > Support" in lines

    laptops_section = lines[lines.index("Searching for 'laptops' tag:") + 1:][:3]
    assert laptops_section == [
        "Found: Laptops",
        "Found: Gaming Laptops",
        "Found: Business Laptops",
    ]

    support_section = lines[lines.index("Searching for 'support' tag:") + 1:][:2]
    assert support_section == ["Found: Services", "Found: Support"]


def test_demo_recency_sections(fixed_clock, capsys):
    main([], clock=fixed_clock)
    lines = capsys.readouterr().out.splitlines()

    start = lines.index("Pages modified in last 3 days:") + 1
    end = lines.index("", start)
    three_days = [line.split(" - ")[0] for line in lines[start:end]]
    assert three_days == ["Home", "Products", "Laptops", "Services", "Support"]

    start = lines.index("Pages modified in last 15 days:") + 1
    fifteen_days = [line.split(" - ")[0] for line in lines[start:] if line]
    assert fifteen_days == [
        "Home", "Products", "Laptops", "Gaming Laptops", "Services", "Support",
    ]
    assert "Home - Fri Mar 15 12:00:00 UTC 2024" in lines


def test_demo_logs_nothing_by_default(fixed_clock, capsys):
    main([], clock=fixed_clock)
    assert capsys.readouterr().err == ""


def test_demo_verbose_logging(fixed_clock, capsys, caplog):
    caplog.set_level(logging.DEBUG, logger="pagetree")
    main(["-vv"], clock=fixed_clock)

    assert logging.getLogger("pagetree").level == logging.DEBUG
    messages = [record.getMessage() for record in caplog.records]
    assert any("Added '/products' under '/'" in message for message in messages)
    assert any("Recency cutoff for 3 days" in message for message in messages)
    assert any(record.name == "pagetree.planning" for record in caplog.records)


@pytest.mark.slow
def test_demo_runs_as_module():
    result = subprocess.run(
        [sys.executable, "-m", "pagetree.demo"],
        cwd=Path(__file__).parent.parent,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "Gaming page: Home > Products > Laptops > Gaming Laptops" in result.stdout
