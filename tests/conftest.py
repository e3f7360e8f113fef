# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Pytest configuration and shared fixtures.

Assumptions:
- Real bcrypt hashing runs at cost 4 to keep the suite fast
- Tests that need expensive costs replace the transform with fake_transform
- Settings changes are undone after each test
"""
import pytest

# Known-good vector: "binary-birds" hashed at cost 6
KNOWN_HASH = "$2b$06$xETUbh.9MrhmYsSTXqg5tOJ/Az0WZuVfpYqvcDhYsuqBt3N1qQ7Bm"
KNOWN_PLAINTEXT = "binary-birds"
KNOWN_SALT = KNOWN_HASH[:29]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")
    config.addinivalue_line("markers", "hypothesis: property-based tests")


@pytest.fixture
def known_vector():
    """Known-good (plaintext, salt, hash) triple.
    
    Returns:
        tuple: (plaintext, 29-char salt, 60-char hash)
    """
    return KNOWN_PLAINTEXT, KNOWN_SALT, KNOWN_HASH


@pytest.fixture
def fast_settings(monkeypatch):
    """Lower the configured costs to the minimum for speed.
    
    Returns:
        Settings: The patched settings object
    """
    from bcryptkit.config import settings
    
    monkeypatch.setattr(settings, "default_cost", 4)
    monkeypatch.setattr(settings, "bare_salt_cost", 4)
    return settings


@pytest.fixture
def fake_transform(monkeypatch):
    """Replace the bcrypt transform with a cheap deterministic stand-in.
    
    The fake mimics the transform contract: it echoes the normalized salt
    followed by a 31-character checksum and records every call.
    
    Returns:
        list: (password, salt) tuples passed to the transform
    """
    calls = []
    
    def transform(password, salt):
        calls.append((password, salt))
        return salt + "C" * 31
    
    monkeypatch.setattr("bcryptkit.hashing.bcrypt_transform", transform)
    return calls
