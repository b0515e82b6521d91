"""Application paths configuration."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    history_path: Path
    config_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        home = Path.home()
        data_home = Path(os.environ.get("XDG_DATA_HOME", str(home / ".local" / "share")))
        config_home = Path(os.environ.get("XDG_CONFIG_HOME", str(home / ".config")))

        return cls(
            history_path=data_home / "clipstack" / "history.json",
            config_path=config_home / "clipstack" / "settings.yml",
        )
