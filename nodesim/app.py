"""FastAPI application factory for the node simulator."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from .config import Settings, get_settings
from .routers import nodes_router, root_router
from .state import RuntimeState
from .store import NodeStore
from .updater import UpdateLoop

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[NodeStore] = None) -> FastAPI:
    settings = settings or get_settings()
    runtime_state = RuntimeState(store=store or NodeStore())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Distributed System Simulator...")
        runtime_state.store.initialize(settings.node_count)
        runtime_state.updater = UpdateLoop(runtime_state.store, settings.update_interval)
        runtime_state.updater.start()
        logger.info("Server initialization completed.")
        try:
            yield
        finally:
            await run_in_threadpool(runtime_state.updater.stop)
            logger.info("Server shutdown completed.")

    app = FastAPI(title="Distributed System Simulator", lifespan=lifespan)
    app.state.settings = settings
    app.state.runtime_state = runtime_state

    app.include_router(root_router.router)
    app.include_router(nodes_router.router)

    return app
