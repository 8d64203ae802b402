"""FastAPI dependencies resolving the runtime built by the lifespan."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from botter.runtime.loop import RuntimeLoop
from botter.session.store import SessionStore


def get_runtime(request: Request) -> RuntimeLoop:
    """Return the RuntimeLoop stored on the app.

    Raises:
        HTTPException: 503 while the lifespan has not built a runtime
    """
    runtime: RuntimeLoop | None = getattr(request.app.state, "runtime", None)
    if runtime is None:
        raise HTTPException(
            status_code=503,
            detail={
                "error": "Service temporarily unavailable",
                "message": "The bot is starting up or failed to load its config.",
            },
        )
    return runtime


def get_store(runtime: Annotated[RuntimeLoop, Depends(get_runtime)]) -> SessionStore:
    """Return the session store behind the runtime."""
    return runtime.store


RuntimeDep = Annotated[RuntimeLoop, Depends(get_runtime)]
StoreDep = Annotated[SessionStore, Depends(get_store)]
