"""
Offloading of blocking render work from the event loop.

Rendering and aggregation are synchronous; handlers run them on the
default executor and stop waiting when the client goes away.
"""

import asyncio
import functools
from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import Request
from starlette.responses import Response

from hqledger.config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

CLIENT_CLOSED_REQUEST = 499
POLL_INTERVAL = 0.05


class ClientDisconnected(Exception):
    """The client hung up before the result was ready."""


async def run_blocking(request: Request, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run func in the default executor, watching for client disconnects.

    Raises:
        ClientDisconnected: The client disconnected first. The worker
            thread finishes on its own and its result is dropped.
    """
    loop = asyncio.get_running_loop()
    future = loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    while True:
        done, _ = await asyncio.wait({future}, timeout=POLL_INTERVAL)
        if done:
            return future.result()
        if await request.is_disconnected():
            future.add_done_callback(_drain)
            logger.info(
                "client_disconnected",
                request_id=getattr(request.state, "request_id", None),
                path=request.url.path,
            )
            raise ClientDisconnected(request.url.path)


def _drain(future: "asyncio.Future[Any]") -> None:
    # Retrieve the exception so asyncio does not report it as unhandled
    if not future.cancelled() and future.exception() is not None:
        logger.warning("abandoned_render_failed", error=str(future.exception()))


def client_closed_response() -> Response:
    """Empty 499 response for abandoned requests."""
    return Response(status_code=CLIENT_CLOSED_REQUEST)
