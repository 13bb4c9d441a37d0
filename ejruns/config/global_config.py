"""Global configuration management (~/.ejruns.global)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


@dataclass
class GlobalConfig:
    """
    Global configuration storing the ejudge server address and API token.
    Stored at ~/.ejruns.global
    """

    base_url: str = ""
    token: str = ""

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".ejruns.global"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file."""
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                return cls(
                    base_url=data.get("base_url", ""), token=data.get("token", "")
                )
        except (json.JSONDecodeError, IOError, AttributeError):
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = self.default_path()

        data = {"base_url": self.base_url, "token": self.token}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def has_server(self) -> bool:
        """Check if a server address is stored."""
        return bool(self.base_url)
