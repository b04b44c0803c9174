"""
Analysis History

Keeps the most recent analysis results, newest first, bounded at HISTORY_LIMIT.
Results are selected and deleted by id. The history can be saved to and loaded
from a JSON file (a list of AnalysisResult.to_dict() entries).

Usage:
    from talentscan.contexts.reporting.history import AnalysisHistory

    history = AnalysisHistory.load(Path("outs/history.json"))
    history.add(analyze(text, "frontend"))
    history.save(Path("outs/history.json"))
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from talentscan.contexts.analysis.analysis_data_structure import AnalysisResult
from talentscan.contexts.reporting.logger import _log_debug, _log_error

HISTORY_LIMIT = 10


class AnalysisHistory:
    """
    Bounded, newest-first collection of AnalysisResult.

    Attributes:
        limit: Maximum number of results kept; the oldest is evicted beyond it
    """

    def __init__(self, results: Iterable[AnalysisResult] = (), limit: int = HISTORY_LIMIT):
        """
        Args:
            results: Initial results, newest first (truncated to limit)
            limit: Maximum number of results kept

        Raises:
            ValueError: If limit is below 1
        """
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self._results: List[AnalysisResult] = list(results)[:limit]

    def add(self, result: AnalysisResult) -> None:
        """Insert a result at the front, evicting the oldest beyond the limit."""
        self._results = [result, *self._results][: self.limit]

    def remove(self, result_id: str) -> bool:
        """
        Delete a result by id.

        Returns:
            True if a result was removed, False if the id was not present
        """
        remaining = [r for r in self._results if r.id != result_id]
        removed = len(remaining) != len(self._results)
        self._results = remaining
        return removed

    def get(self, result_id: str) -> Optional[AnalysisResult]:
        for result in self._results:
            if result.id == result_id:
                return result
        return None

    def latest(self) -> Optional[AnalysisResult]:
        return self._results[0] if self._results else None

    def clear(self) -> None:
        self._results = []

    def __iter__(self) -> Iterator[AnalysisResult]:
        return iter(list(self._results))

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, result_id: object) -> bool:
        return any(r.id == result_id for r in self._results)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save(self, path: Path) -> None:
        """
        Write the history to a JSON file.

        Writes to a temp file first and only replaces the target on success.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = [r.to_dict() for r in self._results]

        temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=path.parent, text=True)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            shutil.move(temp_path, path)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

        _log_debug(f"Saved {len(payload)} results to {path}")

    @classmethod
    def load(cls, path: Path, limit: int = HISTORY_LIMIT) -> "AnalysisHistory":
        """
        Load a history saved with save().

        A missing file gives an empty history. A corrupt file is logged and
        also gives an empty history rather than failing.
        """
        path = Path(path)
        if not path.exists():
            return cls(limit=limit)

        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
            if not isinstance(payload, list):
                raise ValueError(f"expected a list, got {type(payload).__name__}")
            results = [AnalysisResult.from_dict(entry) for entry in payload]
        except (OSError, ValueError, KeyError, TypeError) as e:
            _log_error(f"Failed to load history from {path}: {e}")
            return cls(limit=limit)

        _log_debug(f"Loaded {len(results)} results from {path}")
        return cls(results, limit=limit)
