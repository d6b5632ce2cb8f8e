"""Process-lifetime cache for the flattened task collection."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Iterable

import requests

from content_tracker.adapters.sheets_adapter import parse_payload
from content_tracker.schema import Task

logger = logging.getLogger(__name__)

_PREVIEW_SIZE = 5


class TaskLoadError(RuntimeError):
    """Raised when the sheet payload could not be fetched or decoded."""


def drop_unassigned(tasks: Iterable[Task]) -> tuple[Task, ...]:
    return tuple(t for t in tasks if t.assigned_to)


class TaskCache:
    """Fetches the sheet payload once and serves the published tasks.

    Create one instance per process and hand it to every consumer. The first
    successful ``load`` publishes the assigned tasks; later calls return them
    without fetching. There is no refresh. Callers racing on the first load
    each perform their own fetch.
    """

    def __init__(self, fetcher: Callable[[], Any]):
        self._fetcher = fetcher
        self._tasks: tuple[Task, ...] | None = None

    def is_loaded(self) -> bool:
        return self._tasks is not None

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks if self._tasks is not None else ()

    def load(self) -> tuple[Task, ...]:
        if self._tasks is not None:
            return self._tasks

        try:
            payload = self._fetcher()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Failed to load sheet data: %s", exc)
            raise TaskLoadError("Failed to load data") from exc

        try:
            flattened = parse_payload(payload)
        except ValueError as exc:
            logger.error("Unexpected sheet payload: %s", exc)
            raise TaskLoadError("Failed to load data") from exc

        logger.debug("Flattened tasks (first %d): %s", _PREVIEW_SIZE, flattened[:_PREVIEW_SIZE])
        tasks = drop_unassigned(flattened)
        logger.info("Published %d assigned tasks (%d flattened)", len(tasks), len(flattened))

        self._tasks = tasks
        return tasks

    async def load_async(self) -> tuple[Task, ...]:
        if self._tasks is not None:
            return self._tasks
        return await asyncio.to_thread(self.load)
