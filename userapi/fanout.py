"""Run independent sub-checks concurrently and await them together."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, TypeVar

from userapi.core.config import get_config

T = TypeVar("T")


def with_blank(payload: Mapping[str, Any], key: str) -> dict[str, Any]:
    """Return a copy of ``payload`` with ``key`` set to the empty string."""

    return {**payload, key: ""}


def run_concurrently(calls: Iterable[Callable[[], T]], max_workers: int | None = None) -> list[T]:
    """Execute zero-argument callables in a thread pool.

    Parameters
    ----------
    calls:
        Callables to run. Each must be independent of the others.
    max_workers:
        Pool size; defaults to the active config's ``FANOUT_WORKERS``.

    Returns
    -------
    list[T]
        Results in submission order.

    Raises
    ------
    Exception
        The first failure in submission order, re-raised only after every
        call has finished.
    """

    calls = list(calls)
    if not calls:
        return []
    workers = max_workers or get_config().FANOUT_WORKERS
    with ThreadPoolExecutor(max_workers=min(workers, len(calls))) as pool:
        futures = [pool.submit(call) for call in calls]
        wait(futures)
    return [future.result() for future in futures]
