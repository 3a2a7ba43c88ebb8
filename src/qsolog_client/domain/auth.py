"""Domain models for authentication and identity."""

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    """Roles assigned by the logbook service."""

    OPERATOR = "OPERATOR"
    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Credential:
    """Bearer token issued by the login endpoint."""

    access_token: str
    token_type: str = "Bearer"
    expires_in_seconds: int | None = None

    def authorization_header(self) -> str:
        """Return the value for the Authorization header."""
        return f"{self.token_type} {self.access_token}"


@dataclass(frozen=True)
class User:
    """Read-only projection of the authenticated user."""

    id: str
    email: str
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class Session:
    """Snapshot of the current credential and resolved identity."""

    credential: Credential | None
    current_user: User | None


@dataclass(frozen=True)
class LoginRequest:
    """Login form values."""

    username_or_email: str
    password: str

    def to_payload(self) -> dict[str, object]:
        return {"usernameOrEmail": self.username_or_email, "password": self.password}


@dataclass(frozen=True)
class RegisterRequest:
    """Registration form values."""

    email: str
    username: str
    password: str

    def to_payload(self) -> dict[str, object]:
        return {
            "email": self.email,
            "username": self.username,
            "password": self.password,
        }
