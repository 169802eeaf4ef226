"""JSONL chronicle recorder - captures structured game events."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from zurts.signals import SIGNAL_TYPES, SignalBus


class ChronicleRecorder:
    """Subscribes to a SignalBus and accumulates structured JSONL records."""

    def __init__(self, bus: SignalBus, clock_fn: Callable[[], int]) -> None:
        """*clock_fn* is a callable returning the current turn number."""
        self._records: list[dict[str, Any]] = []
        self._clock_fn = clock_fn
        for sig in SIGNAL_TYPES:
            bus.subscribe(sig, self._make_handler(sig))

    def _make_handler(self, signal_type: str) -> Callable[[str, dict[str, Any]], None]:
        def handler(signal: str, data: dict[str, Any]) -> None:
            record: dict[str, Any] = {
                "turn": self._clock_fn(),
                "type": signal_type,
            }
            record.update(data)
            self._records.append(record)
        return handler

    @property
    def count(self) -> int:
        return len(self._records)

    def records(self, type: str | None = None) -> list[dict[str, Any]]:
        if type is None:
            return list(self._records)
        return [r for r in self._records if r["type"] == type]

    def write(self, path: str | Path) -> int:
        """Write all records as JSONL. Returns number of lines written."""
        p = Path(path)
        with p.open("w") as f:
            for record in self._records:
                f.write(json.dumps(record, default=str) + "\n")
        return len(self._records)
