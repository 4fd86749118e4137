"""
Catalog package for the shorts API.

This package holds the clip schemas, the in-memory ``ClipStore`` and
the routes that expose it. The browser page lists clips with search,
tag filtering and pagination, and posts new clips from its add form.
Should your needs evolve, ``ClipStore`` is the one place to swap for a
database-backed implementation.
"""

from .router import router as catalog_router  # noqa: F401
from .store import ClipStore, InvalidClipError  # noqa: F401
