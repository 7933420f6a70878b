from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger("boggle")


@dataclass
class StageRecord:
    name: str
    elapsed_ms: float = 0.0
    items: int | None = None


class StageTimer:
    """Wall time and item counts (cells read, words found) per solve stage.

    The body of a stage sets `items` on the record it receives:

        with timer.stage("solve") as record:
            record.items = len(words)
    """

    def __init__(self):
        self.stages: list[StageRecord] = []
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        record = StageRecord(name)
        t0 = time.perf_counter()
        try:
            yield record
        finally:
            record.elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
            self.stages.append(record)
            if record.items is None:
                logger.info("stage=%s elapsed=%.1fms", name, record.elapsed_ms)
            else:
                logger.info("stage=%s elapsed=%.1fms items=%d", name, record.elapsed_ms, record.items)

    @property
    def timings(self) -> dict[str, float]:
        return {r.name: r.elapsed_ms for r in self.stages}

    @property
    def counts(self) -> dict[str, int]:
        return {r.name: r.items for r in self.stages if r.items is not None}

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
