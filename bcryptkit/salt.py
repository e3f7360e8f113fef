# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Salt validation and generation.

A salt is either a bare 22-character Radix-64 body, or a full salt:

    <revision tag><2-digit cost>$<22-char body>     e.g. $2b$12$J/dtt5ybYUTCJ/dtt5ybYO

Assumptions:
- Callers validate the cost range before generating a salt
- Random bytes come from the secrets module (OS CSPRNG)
"""
import secrets
from typing import Optional

from bcryptkit import radix64
from bcryptkit.errors import EncodingFailureError
from bcryptkit.revision import SALT_LENGTH, Revision

# Raw bytes behind a 22-character salt body
SALT_BYTES = 16


def random_bytes(count: int) -> bytes:
    """Return count cryptographically secure random bytes.
    
    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Cannot draw a negative number of bytes: {count}")
    return secrets.token_bytes(count)


def is_valid_salt(salt: str) -> bool:
    """Check the shape of a bare or full salt.
    
    Args:
        salt: Salt string to validate
        
    Returns:
        bool: True for a 22-character body, or a known revision tag with
        the full 29-character length
    """
    revision = Revision.lookup(salt[:4])
    if revision is None:
        return len(salt) == SALT_LENGTH
    return len(salt) == revision.full_salt_length


def format_salt(revision: Revision, cost: int, body: str) -> str:
    """Join revision tag, zero-padded cost and body into a full salt."""
    return f"{revision.value}{cost:02d}${body}"


def generate_salt(
    cost: int,
    revision: Revision = Revision.B,
    seed: Optional[bytes] = None
) -> str:
    """Generate a full salt string.
    
    Args:
        cost: Cost factor written into the salt
        revision: Revision tag to use
        seed: Optional 16 raw salt bytes; random bytes are drawn when omitted
        
    Returns:
        str: Full salt such as "$2b$12$J/dtt5ybYUTCJ/dtt5ybYO"
        
    Raises:
        EncodingFailureError: If seed is not exactly 16 bytes
    """
    data = random_bytes(SALT_BYTES) if seed is None else seed
    body = radix64.encode(data)
    if len(body) != SALT_LENGTH:
        raise EncodingFailureError(
            f"Salt seed must be {SALT_BYTES} bytes, got {len(data)}"
        )
    return format_salt(revision, cost, body)
