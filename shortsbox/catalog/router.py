"""
Route definitions for the shorts API.

Endpoints under /api:
- GET  /shorts : list clips with search, tag filter and pagination
- POST /shorts : add a clip, answers 201 with the stored record
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request

from .schemas import Clip, ErrorResponse
from .store import ClipStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["shorts"])


def get_store(request: Request) -> ClipStore:
    """Dependency returning the store the application was created with."""
    return request.app.state.store


@router.get("/shorts", response_model=List[Clip])
def list_shorts(
    q: Optional[str] = Query(default=None, description="Search in title and tags"),
    tag: Optional[str] = Query(default=None, description="Exact tag filter"),
    page: Optional[str] = Query(default=None, description="Page (1-indexed)"),
    limit: Optional[str] = Query(default=None, description="Page size (1-100)"),
    store: ClipStore = Depends(get_store),
) -> List[Clip]:
    """
    Returns one page of clips, newest first.

    ``page`` and ``limit`` are taken as raw strings: the store falls back
    to its defaults for values it cannot use instead of rejecting them.
    """
    return store.get_shorts(
        q=q,
        tag=tag,
        page=page if page is not None else 1,
        limit=limit if limit is not None else 20,
    )


@router.post(
    "/shorts",
    response_model=Clip,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def add_short(
    payload: Any = Body(default=None),
    store: ClipStore = Depends(get_store),
) -> Clip:
    """Add a clip from a ``{videoUrl, title, tags}`` JSON body.

    Invalid bodies raise ``InvalidClipError``, which the application
    turns into a ``400`` response.
    """
    return store.add_short(payload)


@router.api_route(
    "/shorts",
    methods=["PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def shorts_method_not_allowed():
    raise HTTPException(
        status_code=405,
        detail="Method Not Allowed",
        headers={"Allow": "GET, POST"},
    )
