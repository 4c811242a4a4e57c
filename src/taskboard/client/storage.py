"""Local persistence of the bearer token between client sessions."""

import json
from pathlib import Path
from typing import Any


class TokenStorage:
    """Keeps ``{"token": ..., "user": {...}}`` in a JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> tuple[str, dict[str, Any]] | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict):
            return None
        token = data.get("token")
        if not token:
            return None
        return token, data.get("user") or {}

    def save(self, token: str, user: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token, "user": user}), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
