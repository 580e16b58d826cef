"""
In-memory log of recent evaluations.

Entries are kept most recent first and capped at max_entries. An evaluation
whose inputs equal the most recent entry's inputs is not recorded again.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from fis.evaluator import EvaluationResult

history_log = logging.getLogger("history")


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: float
    inputs: Dict[str, float]
    score: float
    category: str


class EvaluationHistory:
    """
    Bounded, most-recent-first list of evaluation summaries.

    Attributes:
        max_entries (int): Maximum number of entries retained.
    """

    def __init__(self, max_entries: int = 50):
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = int(max_entries)
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def record(
        self, result: EvaluationResult, timestamp: Optional[float] = None
    ) -> Optional[HistoryEntry]:
        """
        Adds a result to the front of the history.

        Returns:
            Optional[HistoryEntry]: The new entry, or None if the inputs repeat
                the latest entry and nothing was recorded.
        """
        latest = self.latest()
        if latest is not None and latest.inputs == result.inputs:
            history_log.debug("Skipping repeated inputs %s", result.inputs)
            return None

        entry = HistoryEntry(
            timestamp=time.time() if timestamp is None else timestamp,
            inputs=dict(result.inputs),
            score=result.score,
            category=result.category,
        )
        self._entries.insert(0, entry)
        dropped = len(self._entries) - self.max_entries
        if dropped > 0:
            del self._entries[self.max_entries:]
            history_log.debug("History full, dropped %d oldest entries.", dropped)
        history_log.info(
            "Recorded score= %.2f (%s), %d entries.", entry.score, entry.category, len(self)
        )
        return entry

    def latest(self) -> Optional[HistoryEntry]:
        return self._entries[0] if self._entries else None

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        history_log.info("History cleared.")
