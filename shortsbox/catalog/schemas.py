"""
Pydantic schema definitions for the shorts catalogue.

The ``Clip`` model captures the fields the front-end needs to render a
video card: the video URL, a title and a handful of free-text tags.
Python code uses snake_case attribute names while the JSON payloads
keep the camelCase ``videoUrl`` key the browser sends and expects.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Clip(BaseModel):
    """A single short video entry.

    ``id`` is assigned by the store when the clip is added and is never
    reused. ``tags`` keeps the order and any duplicates given by the
    client; comparisons against tags are case-insensitive at query time.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    video_url: str = Field(alias="videoUrl")
    title: str
    tags: List[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    error: str
