# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Password hashing and verification using bcrypt.

Assumptions:
- Each hash includes a unique salt unless one is supplied
- Hashes are not reversible
- Verification re-hashes with the stored salt and compares checksums
  without early exit
"""
from typing import Union

from bcryptkit.compare import secure_compare
from bcryptkit.hashing import hash_password, hash_password_with_salt, parse_hash
from bcryptkit.logging_utils import log_hash_event, log_security_event

__all__ = ["hash_password", "verify_password"]


def verify_password(password: Union[str, bytes], password_hash: str) -> bool:
    """Verify a password against a hash.
    
    Args:
        password: Plain text password to verify
        password_hash: Hashed password to check against
        
    Returns:
        bool: True if password matches, False otherwise
        
    Raises:
        InvalidHashError: If password_hash is malformed
        InvalidSaltError: If the embedded salt is malformed
        HashFailureError: If re-hashing fails
    """
    parsed = parse_hash(password_hash)
    candidate = hash_password_with_salt(password, parsed.salt)
    candidate_checksum = candidate[-parsed.revision.checksum_length:]
    
    if secure_compare(candidate_checksum, parsed.checksum):
        log_hash_event("hash_verified", revision=parsed.revision.value)
        return True
    
    log_security_event("checksum_mismatch", reason="password does not match hash")
    return False
