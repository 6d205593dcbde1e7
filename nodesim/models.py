"""Pydantic models for node records and API responses."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter

WELCOME_TEXT = "Welcome to the Distributed System Simulator! Visit /nodes to get node data."


def node_name(node_id: int) -> str:
    return f"Node-{node_id}"


class NodeRecord(BaseModel):
    """One simulated node. Immutable; updates replace the record."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    value: int
    time: datetime


class WelcomeMessage(BaseModel):
    message: str = WELCOME_TEXT


NodeList = TypeAdapter(List[NodeRecord])
