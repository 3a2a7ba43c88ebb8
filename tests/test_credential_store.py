"""Tests for the two-tier credential store."""

from qsolog_client.adapters.session_storage import InMemorySessionStorage
from qsolog_client.domain.auth import Credential
from qsolog_client.services.credentials import TOKEN_KEY, CredentialStore


def test_get_returns_none_when_empty(credential_store: CredentialStore) -> None:
    assert credential_store.get() is None
    assert credential_store.has_durable() is False


def test_set_writes_both_tiers(
    credential_store: CredentialStore, storage: InMemorySessionStorage
) -> None:
    credential = Credential("tok1", "Bearer", 3600)

    credential_store.set(credential)

    assert credential_store.get() == credential
    assert storage.get_item(TOKEN_KEY) == "tok1"


def test_transient_value_wins_over_durable(
    credential_store: CredentialStore, storage: InMemorySessionStorage
) -> None:
    credential_store.set(Credential("fresh", expires_in_seconds=60))
    storage.set_item(TOKEN_KEY, "stale")

    assert credential_store.get() == Credential("fresh", expires_in_seconds=60)


def test_durable_token_survives_reload(storage: InMemorySessionStorage) -> None:
    CredentialStore(storage).set(Credential("tok1", "Bearer", 3600))

    reloaded = CredentialStore(storage)

    assert reloaded.transient is None
    assert reloaded.get() == Credential("tok1")
    assert reloaded.has_durable() is True


def test_fresh_tab_context_has_no_credential(storage: InMemorySessionStorage) -> None:
    CredentialStore(storage).set(Credential("tok1"))

    assert CredentialStore(InMemorySessionStorage()).get() is None


def test_clear_is_idempotent(
    credential_store: CredentialStore, storage: InMemorySessionStorage
) -> None:
    credential_store.clear()
    credential_store.set(Credential("tok1"))
    credential_store.clear()
    credential_store.clear()

    assert credential_store.get() is None
    assert storage.items == {}


def test_set_clear_sequences() -> None:
    store = CredentialStore(InMemorySessionStorage())
    operations = ["a", None, "b", "c", None, None, "d"]

    for token in operations:
        if token is None:
            store.clear()
            assert store.get() is None
        else:
            store.set(Credential(token))
            assert store.get() == Credential(token)


def test_authorization_header() -> None:
    assert Credential("tok1").authorization_header() == "Bearer tok1"
