# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/test_display.py

"""Tests for console rendering of workflow results."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from schema_manager.core.operations import InitResult, StatusResult
from schema_manager.system.display import (
    display_error,
    display_file_list,
    display_init_exists,
    display_search_results,
    display_status,
)
from schema_manager.system.progress import CloneProgressReporter


@pytest.fixture
def console_output():
    buffer = StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return console, buffer


def test_file_list(console_output):
    console, buffer = console_output
    count = display_file_list(console, iter(["a/b.hl", "d.hl"]), ".hl")

    assert count == 2
    assert buffer.getvalue().splitlines() == [
        "Listing .hl files in cache directory:",
        "=" * len("Listing .hl files in cache directory:"),
        "  a/b.hl",
        "  d.hl",
    ]


def test_file_list_keeps_brackets(console_output):
    console, buffer = console_output
    display_file_list(console, ["[weird]/x.hl"], ".hl")
    assert "  [weird]/x.hl" in buffer.getvalue().splitlines()


def test_file_list_keeps_colon_codes(console_output):
    console, buffer = console_output
    display_file_list(console, ["x:fire:.hl"], ".hl")
    assert "  x:fire:.hl" in buffer.getvalue().splitlines()


def test_search_header_keeps_colon_codes(console_output):
    console, buffer = console_output
    display_search_results(console, ":smile:|d", ["d.hl"], ".hl")
    assert buffer.getvalue().splitlines()[0] == "Searching for .hl files matching pattern: :smile:|d"


def test_error_keeps_colon_codes(console_output):
    console, buffer = console_output
    display_error(console, ValueError("Error walking directory: /tmp/:fire:"))
    assert buffer.getvalue() == "✗ Error walking directory: /tmp/:fire:\n"


def test_search_results_none(console_output):
    console, buffer = console_output
    count = display_search_results(console, "[a-z", [], ".hl")

    assert count == 0
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "Searching for .hl files matching pattern: [a-z"
    assert lines[-1] == "No .hl files found matching the pattern."


def test_init_exists(console_output):
    console, buffer = console_output
    display_init_exists(console, InitResult(cache_dir=Path("/home/u/.opencmd/commands"), cloned=False))
    assert buffer.getvalue().splitlines() == [
        "Repository already exists at: /home/u/.opencmd/commands",
        "Use -f flag to force re-clone.",
    ]


def test_status_up_to_date(console_output):
    console, buffer = console_output
    display_status(console, StatusResult(local_head="ab" * 20, remote_head="ab" * 20, branch="main"))
    assert buffer.getvalue() == "✓ Local repository is up to date with remote.\n"


def test_status_behind(console_output):
    console, buffer = console_output
    display_status(console, StatusResult(local_head="1" * 40, remote_head="2" * 40, branch="main"))
    assert buffer.getvalue().splitlines() == [
        "✗ Local repository is behind remote.",
        "  Local HEAD:  11111111",
        "  Remote main: 22222222",
        "  Run 'schema-manager init -f' to update.",
    ]


def test_error(console_output):
    console, buffer = console_output
    display_error(console, ValueError("Invalid regex pattern: [x"))
    assert buffer.getvalue() == "✗ Invalid regex pattern: [x\n"


class TestCloneProgressReporter:

    def test_messages(self, console_output):
        console, buffer = console_output
        reporter = CloneProgressReporter(console)
        reporter.report_removed(Path("/c"))
        reporter.start_clone("https://example.org/r", Path("/c"))
        reporter.complete_clone()

        assert buffer.getvalue().splitlines() == [
            "Removed existing cache directory.",
            "Cloning repository to: /c",
            "Repository cloned successfully!",
        ]

    def test_verbose_spinner_stops(self, console_output):
        console, _ = console_output
        reporter = CloneProgressReporter(console, verbose=True)
        reporter.start_clone("https://example.org/r", Path("/c"))
        assert reporter.status is not None
        reporter.complete_clone()
        assert reporter.status is None

    def test_stop_without_spinner(self, console_output):
        console, _ = console_output
        CloneProgressReporter(console).stop()
