"""Botter FastAPI Application.

A transport-neutral HTTP gateway: a messaging adapter posts each user
message and relays the returned replies to its platform.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request

from botter import __version__
from botter.config.loader import ConfigLoader
from botter.core.errors import ConfigError
from botter.core.messages import InboundEvent
from botter.dm.engine import DialogueEngine
from botter.observability.logging import setup_logging
from botter.runtime.loop import RuntimeLoop
from botter.server.dependencies import RuntimeDep, StoreDep
from botter.server.errors import global_exception_handler
from botter.server.models import (
    HealthResponse,
    MessageRequest,
    MessageResponse,
    ReadinessResponse,
    SessionResponse,
)
from botter.session.store import SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - initialize on startup, cleanup on shutdown."""
    try:
        settings = ConfigLoader.load_default()
    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Failed to load config: {e}")
        yield
        return

    setup_logging(level=settings.logging.level, log_file=settings.logging.file)

    async with RuntimeLoop(
        store=SessionStore(),
        engine=DialogueEngine(settings.engine),
        max_concurrency=settings.runtime.max_concurrency,
    ) as runtime:
        app.state.runtime = runtime
        logger.info("RuntimeLoop initialized and ready.")
        yield
        logger.info("RuntimeLoop cleanup...")
        app.state.runtime = None


# Create FastAPI app
app = FastAPI(
    title="Botter",
    description="A conversational bot that learns facts about its users",
    version=__version__,
    lifespan=lifespan,
)

app.add_exception_handler(Exception, global_exception_handler)


@app.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe."""
    runtime = getattr(request.app.state, "runtime", None)
    if runtime is None:
        return HealthResponse(status="starting", version=__version__)
    return HealthResponse(status="healthy", version=__version__, sessions=len(runtime.store))


@app.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """Readiness probe."""
    runtime = getattr(request.app.state, "runtime", None)
    if runtime is None:
        return ReadinessResponse(ready=False, message="Runtime not initialized")
    return ReadinessResponse(ready=True, message="Service is ready")


@app.post("/messages", response_model=MessageResponse)
async def post_message(request: MessageRequest, runtime: RuntimeDep) -> MessageResponse:
    """Apply a user message and return the replies to deliver."""
    event = InboundEvent(user_id=request.user_id, chat_id=request.chat_id, text=request.text)
    return MessageResponse(messages=runtime.handle(event))


@app.get("/sessions/{user_id}", response_model=SessionResponse)
async def get_session(user_id: str, store: StoreDep) -> SessionResponse:
    """Get the current conversation state for a user."""
    if store.find(user_id) is None:
        raise HTTPException(status_code=404, detail=f"No session for user {user_id}")

    with store.borrow(user_id) as live:
        snapshot = live.snapshot()

    return SessionResponse(
        user_id=user_id,
        state=snapshot.state,
        facts=snapshot.facts,
        pending_category=snapshot.pending_category or None,
    )
