"""A JSON array file shared by the JSON repositories.

Writes go to a sibling temp file which then replaces the target, so a
crash mid-write never leaves a truncated file behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path


class JsonFile:

    def __init__(self, path: Path) -> None:
        self.path = path

    def ensure(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")

    def load(self) -> list[dict]:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp, self.path)
