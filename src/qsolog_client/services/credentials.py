"""Two-tier access token storage."""

from dataclasses import dataclass

from qsolog_client.adapters.session_storage import SessionStorage
from qsolog_client.domain.auth import Credential

TOKEN_KEY = "access_token"


@dataclass
class CredentialStore:
    """Holds the current credential in memory with a durable per-tab fallback.

    Reads prefer the in-process value; the durable slot only keeps the raw
    token string so a reloaded process can recover it.
    """

    durable: SessionStorage
    transient: Credential | None = None

    def get(self) -> Credential | None:
        """Return the current credential, if any."""
        if self.transient is not None:
            return self.transient
        token = self.durable.get_item(TOKEN_KEY)
        if token:
            return Credential(access_token=token)
        return None

    def set(self, credential: Credential) -> None:
        """Store a credential in both tiers."""
        self.transient = credential
        self.durable.set_item(TOKEN_KEY, credential.access_token)

    def clear(self) -> None:
        """Remove the credential from both tiers."""
        self.transient = None
        self.durable.remove_item(TOKEN_KEY)

    def has_durable(self) -> bool:
        return bool(self.durable.get_item(TOKEN_KEY))
