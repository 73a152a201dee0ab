"""High score persistence: a single integer kept in a small JSON file."""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _coerce_score(value) -> int:
    """Return value as a non-negative int, or 0 if it isn't one."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, str) and value.strip().isdigit():
        try:
            return int(value.strip())
        except ValueError:
            # non-ASCII digits, or past the int string length limit
            return 0
    return 0


class HighScoreStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return 0
        if isinstance(data, dict):
            data = data.get("high_score")
        return _coerce_score(data)

    def save(self, score: int) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps({"high_score": int(score)}), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            logger.error("Could not save high score to %s: %s", self.path, exc)
