"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

from shop.domain.exceptions import DuplicateEntityError
from shop.domain.model.user import User
from shop.domain.repository.user_repository import UserRepository
from shop.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._lock = threading.RLock()
        self._file.ensure()

    # --- UserRepository interface ---------------------------------------------

    def get_by_email(self, email: str) -> User | None:
        with self._lock:
            for raw in self._file.load():
                if raw["email"] == email:
                    return self._to_domain(raw)
        return None

    def add(self, user: User) -> None:
        with self._lock:
            records = self._file.load()
            if any(raw["email"] == user.email for raw in records):
                raise DuplicateEntityError("Email is already registered")
            records.append(self._to_raw(user))
            self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role,
            "password_hash": user.password_hash,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            role=raw["role"],
            password_hash=raw["password_hash"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
