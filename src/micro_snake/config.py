"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from micro_snake.autoplay import Difficulty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game session.

    ``difficulty`` names a preset in the session's preset table;
    ``tick_interval`` overrides that preset's cadence when set.
    """

    columns: int = 18
    rows: int = 18
    seed: int | None = None
    difficulty: str = Difficulty.NORMAL.value
    autoplay: bool = False
    tick_interval: float | None = None

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Board dimensions must be positive.")
        if not self.difficulty:
            raise ValueError("difficulty must name a preset.")
        if self.tick_interval is not None and self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
