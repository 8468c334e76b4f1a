"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed phcformat package.
"""

import pytest


# (phc string, expected fields) pairs that survive decode -> encode unchanged.
CANONICAL_CORPUS = [
    ("$argon2id", {"id": "argon2id"}),
    ("$argon2i$v=19", {"id": "argon2i", "version": 19}),
    ("$pbkdf2$rounds=1000", {"id": "pbkdf2", "params": {"rounds": 1000}}),
    ("$argon2i$c2FsdA", {"id": "argon2i", "salt": b"salt"}),
    ("$argon2i$", {"id": "argon2i", "salt": b""}),
    (
        "$argon2i$m=120,t=5000,p=2",
        {"id": "argon2i", "params": {"m": 120, "t": 5000, "p": 2}},
    ),
    (
        "$argon2i$v=19$c2FsdA$aGFzaA",
        {"id": "argon2i", "version": 19, "salt": b"salt", "hash": b"hash"},
    ),
    (
        "$scrypt$ln=15,r=8,p=1$c2FsdA$aGFzaA",
        {
            "id": "scrypt",
            "params": {"ln": 15, "r": 8, "p": 1},
            "salt": b"salt",
            "hash": b"hash",
        },
    ),
    (
        "$argon2id$v=19$m=4096,t=3,p=1$c2FsdA$aGFzaA",
        {
            "id": "argon2id",
            "version": 19,
            "params": {"m": 4096, "t": 3, "p": 1},
            "salt": b"salt",
            "hash": b"hash",
        },
    ),
    (
        "$bcrypt-sha256$t=2b,r=12$c3RyaW5n",
        {"id": "bcrypt-sha256", "params": {"t": "2b", "r": 12}, "salt": b"string"},
    ),
]


@pytest.fixture(params=CANONICAL_CORPUS, ids=[phc for phc, _ in CANONICAL_CORPUS])
def canonical_case(request):
    """One canonical (phc string, fields) pair."""
    return request.param


@pytest.fixture
def salt16() -> bytes:
    return bytes(range(16))


@pytest.fixture
def hash32() -> bytes:
    return bytes(range(100, 132))
