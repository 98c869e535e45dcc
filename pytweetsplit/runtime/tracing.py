from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Literal

from ..types import Trace, TraceEvent


@contextmanager
def trace_timing(
    trace: Trace,
    stage: Literal["parse", "split", "prefix"],
    name: str,
    **details: Any,
) -> Iterator[dict[str, Any]]:
    """Time the enclosed block and append a TraceEvent to ``trace``.

    The yielded dict is stored as the event details, so callers can add
    results (counts, flags) while the block runs.
    """
    start = time.perf_counter()
    try:
        yield details
    finally:
        ms = (time.perf_counter() - start) * 1000.0
        trace.events.append(
            TraceEvent(stage=stage, name=name, ms=ms, details=dict(details))
        )
