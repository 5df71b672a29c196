from __future__ import annotations

import pytest

from carfinder.adapters.pbkdf2_password_hasher import Pbkdf2PasswordHasher


@pytest.fixture()
def hasher() -> Pbkdf2PasswordHasher:
    # Low iteration count keeps the suite fast
    return Pbkdf2PasswordHasher(iterations=1000)


def test_hash_round_trip(hasher: Pbkdf2PasswordHasher) -> None:
    stored = hasher.hash("secret123")

    assert stored.startswith("pbkdf2_sha256$1000$")
    assert "secret123" not in stored
    assert hasher.verify(stored, "secret123")
    assert not hasher.verify(stored, "secret124")


def test_salts_differ(hasher: Pbkdf2PasswordHasher) -> None:
    assert hasher.hash("secret123") != hasher.hash("secret123")


def test_iterations_are_read_from_the_stored_hash(hasher: Pbkdf2PasswordHasher) -> None:
    stored = Pbkdf2PasswordHasher(iterations=2000).hash("secret123")

    assert hasher.verify(stored, "secret123")


@pytest.mark.parametrize(
    "stored",
    ["", "plain-text", "md5$1000$00$00", "pbkdf2_sha256$many$00$00", "pbkdf2_sha256$1000$zz$00"],
)
def test_malformed_hashes_never_verify(hasher: Pbkdf2PasswordHasher, stored: str) -> None:
    assert not hasher.verify(stored, "secret123")
