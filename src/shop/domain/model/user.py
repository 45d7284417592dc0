"""User account.

An account pairs a login (email plus password hash) with the role that
tokens issued for it carry.  Password hashing itself happens outside
the domain; the account only stores the result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import new_user_id

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def normalize_email(value: object) -> str:
    """Return *value* trimmed and lower-cased, or raise if it is not an email."""
    if not isinstance(value, str) or not _EMAIL_PATTERN.match(value.strip()):
        raise ValidationError("A valid email is required")
    return value.strip().lower()


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, email: str, password_hash: str, role: str = ROLE_USER) -> User:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name is required")
        if role not in ROLES:
            raise ValidationError(f"Unknown role: {role}")
        return User(
            id=new_user_id(),
            name=name.strip(),
            email=normalize_email(email),
            role=role,
            password_hash=password_hash,
        )
