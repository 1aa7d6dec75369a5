"""Local JSON-file run log."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import RunStoreError
from .models import Run, RunSummary

logger = logging.getLogger(__name__)

SHARE_BASE_URL = "https://runtrack.app/runs"


class RunStore:
    """
    Repository for completed runs kept in a single JSON file.

    The file holds a list of run records, newest first. It is read on
    every call so several processes can share one log.
    """

    def __init__(self, path: Path):
        """
        Initialize store for a file path.

        Args:
            path: JSON file location; created on first write
        """
        self.path = path

    def _load(self) -> list[Run]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as f:
                data: list[dict[str, Any]] = json.load(f)
            return [Run.model_validate(item) for item in data]
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.error(f"Failed to read run store {self.path}: {e}")
            raise RunStoreError(f"Cannot read run store {self.path}: {e}") from e

    def _save(self, runs: list[Run]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(
                    [run.model_dump(mode="json", by_alias=True) for run in runs],
                    f,
                    indent=2,
                )
        except OSError as e:
            logger.error(f"Failed to write run store {self.path}: {e}")
            raise RunStoreError(f"Cannot write run store {self.path}: {e}") from e

    def add_run(self, run: Run) -> Run:
        """Store a run at the top of the log."""
        runs = self._load()
        runs.insert(0, run)
        self._save(runs)
        logger.info(f"Stored run {run.run_id} ({run.distance_km:.2f} km)")
        return run

    def add_summary(self, summary: RunSummary, notes: str | None = None) -> Run:
        """
        Convert a finished session summary into a run and store it.

        Suitable as a session's on_complete callback.
        """
        return self.add_run(Run.from_summary(summary, notes=notes))

    def list_runs(self, offset: int = 0, limit: int | None = None) -> list[Run]:
        """
        List stored runs, newest first.

        Args:
            offset: Number of runs to skip
            limit: Maximum number of runs to return (all if None)
        """
        runs = self._load()[offset:]
        if limit is not None:
            runs = runs[:limit]
        return runs

    def count(self) -> int:
        return len(self._load())

    def get_run(self, run_id: str) -> Run:
        """
        Fetch a single run by id or unique id prefix.

        Raises:
            RunStoreError: If no run, or more than one, matches
        """
        matches = [run for run in self._load() if run.run_id.startswith(run_id)]
        if not matches:
            raise RunStoreError(f"Run {run_id} not found")
        if len(matches) > 1:
            raise RunStoreError(f"Run id prefix {run_id} is ambiguous")
        return matches[0]

    def delete_run(self, run_id: str) -> Run:
        """Remove a run from the log and return it."""
        target = self.get_run(run_id)
        runs = [run for run in self._load() if run.run_id != target.run_id]
        self._save(runs)
        logger.info(f"Deleted run {target.run_id}")
        return target

    def set_public(self, run_id: str, is_public: bool) -> Run:
        """Share or unshare a run; shared runs get a public URL."""
        target = self.get_run(run_id)
        runs = self._load()
        for index, run in enumerate(runs):
            if run.run_id == target.run_id:
                runs[index] = run.model_copy(
                    update={
                        "is_public": is_public,
                        "share_url": f"{SHARE_BASE_URL}/{run.run_id}" if is_public else None,
                    }
                )
                target = runs[index]
                break
        self._save(runs)
        return target
