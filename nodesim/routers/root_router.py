"""Router exposing the welcome endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ..models import WelcomeMessage

router = APIRouter()


@router.get("/", response_model=WelcomeMessage)
async def root() -> WelcomeMessage:
    """Welcome message pointing at /nodes."""
    return WelcomeMessage()
