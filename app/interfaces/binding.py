"""
FastAPI integration for the request binding engine.

Routes declare the record they expect with ``Depends(bound(SCHEMA))``;
the dependency snapshots the request into a RequestView, binds a fresh
record, validates it and hands it to the route. Binding and validation
errors propagate to the centralized error handlers.
"""

from typing import Any, Awaitable, Callable

from fastapi import HTTPException, Request

from app.core.config import settings
from app.shared.binding import RecordSchema, RequestView, bind, validate

HTTP_413 = 413


async def _read_capped_body(request: Request, limit: int) -> bytes:
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=HTTP_413, detail="Request body too large")

    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise HTTPException(status_code=HTTP_413, detail="Request body too large")
        chunks.append(chunk)
    return b"".join(chunks)


async def request_view_from_starlette(request: Request) -> RequestView:
    """Snapshot a Starlette request for the binder.

    The body is read in chunks and abandoned as soon as it passes the
    configured maximum; a larger Content-Length is refused unread.

    Raises:
        HTTPException: 413 if the body exceeds the configured maximum.
    """
    body = await _read_capped_body(request, settings.max_request_size_bytes)

    return RequestView.from_pairs(
        method=request.method,
        body=body,
        query_pairs=request.query_params.multi_items(),
        path_params={k: str(v) for k, v in request.path_params.items()},
        headers=dict(request.headers),
    )


def bound(schema: RecordSchema) -> Callable[[Request], Awaitable[Any]]:
    """Build a dependency that yields a bound, validated record.

    Args:
        schema: Description of the record the route expects.

    Returns:
        An async FastAPI dependency.
    """

    async def dependency(request: Request) -> Any:
        view = await request_view_from_starlette(request)
        record = schema.new()
        bind(view, record, schema)
        validate(record, schema)
        return record

    dependency.__name__ = f"bind_{schema.name}"
    return dependency
