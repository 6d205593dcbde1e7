"""Router exposing the node snapshot endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from pydantic_core import PydanticSerializationError

from ..dependencies import get_node_store
from ..models import NodeList
from ..store import NodeStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/nodes")
def get_nodes(store: NodeStore = Depends(get_node_store)) -> Response:
    """Return a consistent snapshot of every node, ordered by id."""
    nodes = store.snapshot()
    try:
        body = NodeList.dump_json(nodes)
    except (PydanticSerializationError, TypeError, ValueError):
        logger.exception("Failed to marshal %d nodes", len(nodes))
        return PlainTextResponse("Failed to marshal data", status_code=500)
    return Response(content=body, media_type="application/json")
