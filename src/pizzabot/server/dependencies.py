"""FastAPI dependencies for server endpoints."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from pizzabot.runtime.loop import BotRuntime


def get_runtime(request: Request) -> BotRuntime:
    """Dependency to get the initialized BotRuntime.

    Raises:
        HTTPException: 503 if runtime not initialized
    """
    runtime = getattr(request.app.state, "runtime", None)
    if runtime is None:
        raise HTTPException(
            status_code=503,
            detail={
                "error": "Service temporarily unavailable",
                "message": "Server is starting up. Please try again in a few seconds.",
            },
        )
    return runtime


RuntimeDep = Annotated[BotRuntime, Depends(get_runtime)]
