from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DATA_PATH = "moviedata.txt"
DEFAULT_TARGET = "<a>Bacon, Kevin (I)"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, read from ``BACON_*`` environment variables."""

    data_path: Path = Path(DEFAULT_DATA_PATH)
    default_target: str = DEFAULT_TARGET
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            data_path=Path(env.get("BACON_DATA_PATH") or DEFAULT_DATA_PATH),
            default_target=env.get("BACON_DEFAULT_TARGET") or DEFAULT_TARGET,
            encoding=env.get("BACON_ENCODING") or DEFAULT_ENCODING,
            log_level=(env.get("BACON_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(self, **overrides: object) -> "Settings":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        if "data_path" in changes:
            changes["data_path"] = Path(changes["data_path"])
        return replace(self, **changes)
