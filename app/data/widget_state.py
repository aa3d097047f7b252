"""
Per-widget fetch lifecycle.

    IDLE -> LOADING -> SUCCESS | ERROR

Both end states are terminal; there is no retry transition. A new render
creates new runs, so every render fetches again.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from data.notifications import Notification
from data.result import Result
from logging_utils import log_event

logger = logging.getLogger(__name__)


class WidgetState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransitionError(RuntimeError):
    pass


class WidgetRun:
    def __init__(self, key: str, title: str):
        self.key = key
        self.title = title
        self.state = WidgetState.IDLE
        self.result: Optional[Result[Any]] = None
        self.notifications: List[Notification] = []
        self.elapsed_ms: Optional[float] = None

    @property
    def done(self) -> bool:
        return self.state in (WidgetState.SUCCESS, WidgetState.ERROR)

    def start(self) -> None:
        if self.state is not WidgetState.IDLE:
            raise InvalidTransitionError(f"{self.key}: cannot start from {self.state.value}")
        self.state = WidgetState.LOADING

    def finish(self, result: Result[Any], notifications: Sequence[Notification] = ()) -> None:
        if self.state is not WidgetState.LOADING:
            raise InvalidTransitionError(f"{self.key}: cannot finish from {self.state.value}")
        self.result = result
        self.notifications = list(notifications)
        self.state = WidgetState.SUCCESS if result.ok else WidgetState.ERROR


@dataclass(frozen=True)
class WidgetSpec:
    key: str
    title: str
    load: Callable[[Any], Result[Any]]  # called with the widget's own sources


def run_widget(spec: WidgetSpec, make_sources: Callable[[], Any]) -> WidgetRun:
    """Run one widget's fetch start to finish with freshly built sources."""
    run = WidgetRun(spec.key, spec.title)
    sources = make_sources()
    run.start()
    started = time.perf_counter()
    try:
        result = spec.load(sources)
    finally:
        sources.close()
    run.elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
    run.finish(result, sources.notifier.drain())
    log_event(
        logger,
        logging.INFO,
        "widget_finished",
        widget=spec.key,
        state=run.state.value,
        elapsed_ms=run.elapsed_ms,
    )
    return run


def run_widgets(specs: Sequence[WidgetSpec], make_sources: Callable[[], Any], max_workers: int = 6) -> List[WidgetRun]:
    """
    Run every widget concurrently. Completion order is unspecified; the
    returned list follows ``specs``.
    """
    if not specs:
        return []
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="widget") as pool:
        futures = [pool.submit(run_widget, spec, make_sources) for spec in specs]
        return [f.result() for f in futures]
