"""
In-memory data store for the shorts catalogue.

``ClipStore`` holds the clip records for the lifetime of the process.
Nothing is persisted: a restart (or an explicit ``reset()``) brings back
the ten seed clips in ``DEFAULT_SHORTS``. The web application creates
one store and hands it to the routes, so tests can build their own
instance instead of sharing module state.
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from .schemas import Clip

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

DEFAULT_SHORTS: Tuple[dict, ...] = (
    {
        "id": 1,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-5s.mp4",
        "title": "City Timelapse",
        "tags": ["timelapse", "city"],
    },
    {
        "id": 2,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-10s.mp4",
        "title": "Close-up Nature",
        "tags": ["nature", "macro"],
    },
    {
        "id": 3,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-15s.mp4",
        "title": "W3Schools Sample",
        "tags": ["sample", "demo"],
    },
    {
        "id": 4,
        "videoUrl": "https://www.w3schools.com/html/mov_bbb.mp4",
        "title": "Big Buck Bunny (trim)",
        "tags": ["animation", "demo"],
    },
    {
        "id": 5,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-5s.mp4",
        "title": "Ocean Waves",
        "tags": ["ocean", "nature"],
    },
    {
        "id": 6,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-10s.mp4",
        "title": "Night Drive",
        "tags": ["car", "city"],
    },
    {
        "id": 7,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-15s.mp4",
        "title": "Minimalist Shapes",
        "tags": ["design", "abstract"],
    },
    {
        "id": 8,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-5s.mp4",
        "title": "Street Performer",
        "tags": ["music", "street"],
    },
    {
        "id": 9,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-10s.mp4",
        "title": "Coffee Pour",
        "tags": ["food", "coffee"],
    },
    {
        "id": 10,
        "videoUrl": "https://samplelib.com/lib/preview/mp4/sample-15s.mp4",
        "title": "Clouds Timelapse",
        "tags": ["timelapse", "clouds"],
    },
)


class InvalidClipError(ValueError):
    """Raised when a payload passed to ``add_short`` is not a valid clip."""


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison.

    Parameters
    ----------
    s : Optional[str]
        The string to normalize. Non-string values are treated as empty.

    Returns
    -------
    str
        The lowercased, stripped string, or ``""`` for ``None``.
    """
    if not isinstance(s, str):
        return ""
    return s.strip().lower()


def _coerce_positive(value: Any, default: int) -> int:
    """Turn a page/limit value into an int, falling back to ``default``.

    Missing, non-numeric, NaN and zero values use the default; infinite
    values saturate and negative values are floored to 1 by the callers.
    """
    try:
        n = int(value)
    except OverflowError:
        return sys.maxsize if value > 0 else -sys.maxsize
    except (TypeError, ValueError):
        return default
    return n or default


class ClipStore:
    """Ordered, append-only collection of ``Clip`` records.

    Each clip is kept together with an insertion sequence number which
    drives the newest-first ordering of query results, so the ordering
    does not depend on how ids happen to be assigned. Routes run in
    FastAPI's threadpool, so reads and writes go through ``_lock``.
    """

    def __init__(self, clips: Optional[Iterable[Any]] = None) -> None:
        self._seed = tuple(DEFAULT_SHORTS if clips is None else clips)
        self._items: List[Tuple[int, Clip]] = []
        self._seq = 0
        self._lock = threading.Lock()
        self.reset()

    def __len__(self) -> int:
        return len(self._items)

    def reset(self) -> None:
        """Restore the seed clips, discarding everything added since."""
        with self._lock:
            self._items = []
            self._seq = 0
            for entry in self._seed:
                clip = entry.model_copy(deep=True) if isinstance(entry, Clip) else Clip.model_validate(entry)
                self._append(clip)

    def _append(self, clip: Clip) -> Clip:
        self._seq += 1
        self._items.append((self._seq, clip))
        return clip

    def _next_id(self) -> int:
        return max((clip.id for _, clip in self._items), default=0) + 1

    def get_shorts(
        self,
        q: Optional[str] = None,
        tag: Optional[str] = None,
        page: Any = DEFAULT_PAGE,
        limit: Any = DEFAULT_LIMIT,
    ) -> List[Clip]:
        """Search, filter and paginate the stored clips.

        Parameters
        ----------
        q : Optional[str]
            Free-text search. Keeps clips whose title or any tag contains
            the text (case-insensitive). Ignored when blank.
        tag : Optional[str]
            Exact tag filter (case-insensitive). Ignored when blank.
        page : int
            1-indexed page number. Invalid or zero values mean page 1.
        limit : int
            Page size, clamped to ``[1, MAX_LIMIT]``. Invalid or zero
            values mean ``DEFAULT_LIMIT``.

        Returns
        -------
        List[Clip]
            A new list with the clips of the requested page, newest
            first. Pages past the end give an empty list.
        """
        with self._lock:
            items = list(self._items)
        nq = _norm(q)
        ntag = _norm(tag)

        if nq:
            def _matches(clip: Clip) -> bool:
                if nq in _norm(clip.title):
                    return True
                return any(nq in _norm(t) for t in clip.tags)
            items = [(seq, c) for seq, c in items if _matches(c)]

        if ntag:
            items = [(seq, c) for seq, c in items if any(_norm(t) == ntag for t in c.tags)]

        items.sort(key=lambda pair: pair[0], reverse=True)

        p = max(1, _coerce_positive(page, DEFAULT_PAGE))
        lim = max(1, min(MAX_LIMIT, _coerce_positive(limit, DEFAULT_LIMIT)))
        start = (p - 1) * lim
        end = start + lim
        logger.debug(
            "Query q=%r tag=%r page=%s limit=%s matched %s clips", q, tag, p, lim, len(items)
        )
        return [clip for _, clip in items[start:end]]

    def add_short(self, payload: Any) -> Clip:
        """Validate ``payload`` and append it as a new clip.

        The checks run in a fixed order and the first failure wins: the
        payload must be a mapping, then ``videoUrl`` and ``title`` must be
        non-empty strings, then ``tags`` must be a list of strings (an
        empty list is fine).

        Parameters
        ----------
        payload : Mapping
            ``{"videoUrl": str, "title": str, "tags": [str, ...]}``.
            ``video_url`` is accepted as an alternative key.

        Returns
        -------
        Clip
            The stored record with its newly assigned id. The same object
            is kept in the store.

        Raises
        ------
        InvalidClipError
            If any of the checks above fails.
        """
        if not isinstance(payload, Mapping):
            raise InvalidClipError("Invalid payload")
        video_url = payload.get("videoUrl", payload.get("video_url"))
        title = payload.get("title")
        tags = payload.get("tags")
        if not video_url or not isinstance(video_url, str):
            raise InvalidClipError("videoUrl required")
        if not title or not isinstance(title, str):
            raise InvalidClipError("title required")
        if not isinstance(tags, (list, tuple)):
            raise InvalidClipError("tags must be array")
        if not all(isinstance(t, str) for t in tags):
            raise InvalidClipError("tags must be array of strings")

        with self._lock:
            clip = Clip(id=self._next_id(), video_url=video_url, title=title, tags=list(tags))
            self._append(clip)
        logger.info("Added clip %s (%s)", clip.id, clip.title)
        return clip
