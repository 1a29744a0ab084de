"""High-score persistence behind a two-method contract."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def get_high_score(self) -> int: ...

    def set_high_score(self, value: int) -> None: ...


class InMemoryHighScoreStore:
    def __init__(self, value: int = 0) -> None:
        self.value = int(value)

    def get_high_score(self) -> int:
        return self.value

    def set_high_score(self, value: int) -> None:
        self.value = int(value)


class JsonHighScoreStore:
    """Keeps ``{"high_score": <int>}`` in a small JSON file.

    A missing file reads as 0. An unreadable or malformed file also reads as
    0 and is logged; it is overwritten on the next write. Write errors
    propagate to the caller.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            value = int(data["high_score"])
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return 0
        return max(value, 0)

    def set_high_score(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"high_score": int(value)}), encoding="utf-8")
