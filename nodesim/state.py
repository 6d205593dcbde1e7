"""Runtime state container for the FastAPI application."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .store import NodeStore
from .updater import UpdateLoop


@dataclass
class RuntimeState:
    """Holds the objects shared by request handlers and the background task."""

    store: NodeStore = field(default_factory=NodeStore)
    updater: Optional[UpdateLoop] = None
