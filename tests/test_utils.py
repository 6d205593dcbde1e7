"""Tests for utility functions."""

from __future__ import annotations

import logging

from nodesim.config import Settings
from nodesim.utils import configure_logging, describe_settings


def test_describe_settings_lists_endpoints() -> None:
    banner = describe_settings(Settings(node_count=7, update_interval=2.5))
    assert "Nodes: 7" in banner
    assert "Update Interval: 2.5s" in banner
    assert "GET  /nodes" in banner


def test_configure_logging_debug_mode() -> None:
    configure_logging(Settings(debug_mode=True))
    assert logging.getLogger("nodesim").level == logging.DEBUG

    configure_logging(Settings(debug_mode=False))
    assert logging.getLogger("nodesim").level == logging.INFO
