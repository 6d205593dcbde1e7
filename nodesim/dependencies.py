"""Common FastAPI dependencies."""

from __future__ import annotations

from fastapi import Depends, Request

from .state import RuntimeState
from .store import NodeStore


def get_runtime_state(request: Request) -> RuntimeState:  # pragma: no cover - trivial accessor
    return request.app.state.runtime_state  # type: ignore[attr-defined]


def get_node_store(state: RuntimeState = Depends(get_runtime_state)) -> NodeStore:
    return state.store
