"""Client configuration loaded from the environment (and ``.env``)."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


def _default_state_dir() -> str:
    return str(Path.home() / ".employee_records")


@dataclass
class ClientSettings:
    api_url: str = field(default_factory=lambda: os.getenv("EMPLOYEES_API_URL", "http://localhost:5000"))
    state_dir: str = field(default_factory=lambda: os.getenv("EMPLOYEES_STATE_DIR", _default_state_dir()))
    http_timeout: float = field(default_factory=lambda: float(os.getenv("EMPLOYEES_HTTP_TIMEOUT", "10")))

    @property
    def storage_path(self) -> Path:
        return Path(self.state_dir) / "local_storage.json"


def get_client_settings() -> ClientSettings:
    load_dotenv(override=False)
    return ClientSettings()
