"""Revalidation signal.

After a write commits, the page paths whose rendering depends on the changed
records are handed to a callback. What the callback does with a path (purge
a cache, set a response header) is up to the caller.
"""

from typing import Callable

import logfire

Revalidate = Callable[[str], None]


def no_revalidation(path: str) -> None:
    """Callback used when the caller has no cache to invalidate."""
    logfire.debug("Revalidation skipped", path=path)


class RevalidationRecorder:
    """Collects revalidated paths in call order."""

    def __init__(self) -> None:
        self.paths: list[str] = []

    def __call__(self, path: str) -> None:
        self.paths.append(path)
