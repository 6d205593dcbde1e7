"""Utility functions used across modules."""

from __future__ import annotations

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Set up root logging; DEBUG_MODE switches the nodesim loggers to DEBUG."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logging.getLogger("nodesim").setLevel(logging.DEBUG if settings.debug_mode else logging.INFO)


def describe_settings(settings: Settings) -> str:
    """Startup banner listing configuration and endpoints."""
    lines = [
        "--- Distributed System Simulator ---",
        f"Debug Mode: {settings.debug_mode}",
        f"Nodes: {settings.node_count}",
        f"Update Interval: {settings.update_interval:g}s",
        "Endpoints:",
        "  GET  /",
        "  GET  /nodes",
        "------------------------------------",
    ]
    return "\n".join(lines)
