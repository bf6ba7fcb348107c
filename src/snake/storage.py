# storage.py
"""
High score persistence.

A small JSON object on disk stands in for the browser's localStorage:
one fixed key whose value is the score written as text. Every failure is
tolerated; reads fall back to 0 and writes are dropped with a warning.
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Union
import json
import logging

from .config import HIGH_SCORE_KEY, default_scores_path

log = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path: Optional[Union[str, Path]] = None, key: str = HIGH_SCORE_KEY):
        self.path = Path(path) if path is not None else default_scores_path()
        self.key = key

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def get_high_score(self) -> int:
        try:
            value = int(self._load().get(self.key, 0))
        except (OSError, ValueError, TypeError) as e:
            log.warning("could not read high score from %s: %s", self.path, e)
            return 0
        return max(value, 0)

    def set_high_score(self, score: int) -> None:
        try:
            try:
                data = self._load()
            except ValueError:
                data = {}  # unreadable content gets replaced
            data[self.key] = str(int(score))
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # atomic swap
            tmp = self.path.with_name(self.path.name + ".tmp")
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)
            return
        log.info("saved high score %d to %s", score, self.path)
