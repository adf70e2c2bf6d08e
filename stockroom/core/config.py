"""Environment driven settings.

Reads ``.env`` (if present) via python-dotenv, then the process environment:

* ``STOCKROOM_DATA_DIR``  directory holding snapshot files (default ``data``)
* ``STOCKROOM_LOG_LEVEL`` logging level name (default ``INFO``)
* ``STOCKROOM_DEBUG=1``   force DEBUG logging
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv  # type: ignore


@dataclass(frozen=True)
class Settings:
    data_dir: Path = Path("data")
    log_level: str = "INFO"
    debug: bool = False

    def snapshot_path(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        data_dir=Path(os.getenv("STOCKROOM_DATA_DIR") or "data"),
        log_level=(os.getenv("STOCKROOM_LOG_LEVEL") or "INFO").upper(),
        debug=os.getenv("STOCKROOM_DEBUG") == "1",
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
