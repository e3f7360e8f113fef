# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Bcrypt hash creation and parsing.

Hash string layout:

    <revision tag><2-digit cost>$<22-char salt body><31-char checksum>

Assumptions:
- The revision tag of the output is the one the caller supplied, even
  though $2y$ is hashed as $2b$ (the transform has no native $2y$ support)
- Every validation failure is raised before the transform runs
- No retries: cost, format and transform failures are not transient
"""
from typing import NamedTuple, Optional, Union

from bcryptkit.config import settings
from bcryptkit.errors import InvalidCostError, InvalidHashError, InvalidSaltError
from bcryptkit.logging_utils import log_hash_event, log_security_event
from bcryptkit.revision import SALT_LENGTH, Revision
from bcryptkit.salt import format_salt, generate_salt, is_valid_salt
from bcryptkit.transform import bcrypt_transform

MIN_COST = 4
MAX_COST = 31


class ParsedHash(NamedTuple):
    """A stored hash split into its parts."""
    
    revision: Revision
    salt: str
    checksum: str
    
    @property
    def cost(self) -> int:
        digits = self.salt[self.revision.revision_length:self.revision.revision_length + 2]
        if not digits.isdigit():
            raise InvalidHashError(f"Invalid hash formatting: cost field {digits!r}")
        return int(digits)


def check_cost(cost: int) -> None:
    """Raise InvalidCostError unless cost is an int in [MIN_COST, MAX_COST]."""
    if isinstance(cost, bool) or not isinstance(cost, int):
        log_security_event("invalid_cost", reason="cost is not an integer", cost=repr(cost))
        raise InvalidCostError(f"Cost must be an integer, got {cost!r}")
    if not MIN_COST <= cost <= MAX_COST:
        log_security_event("invalid_cost", reason="cost out of range", cost=cost)
        raise InvalidCostError(f"Cost should be between {MIN_COST} and {MAX_COST}, got {cost}")


def hash_password(password: Union[str, bytes], cost: Optional[int] = None) -> str:
    """Hash a password with a freshly generated salt.
    
    Args:
        password: Plain text password
        cost: Log2 rounds; settings.default_cost when omitted
        
    Returns:
        str: 60-character bcrypt hash
        
    Raises:
        InvalidCostError: If cost is outside [4, 31]
        HashFailureError: If the bcrypt transform fails
    """
    if cost is None:
        cost = settings.default_cost
    check_cost(cost)
    revision = Revision(settings.default_revision)
    return hash_password_with_salt(password, generate_salt(cost, revision))


def hash_password_with_salt(password: Union[str, bytes], salt: str) -> str:
    """Hash a password with a caller-supplied salt.
    
    Args:
        password: Plain text password
        salt: Full salt ("$2y$06$" + 22-char body) or a bare 22-char body
        
    Returns:
        str: Hash carrying the salt's own revision tag ($2b$ for bare bodies)
        
    Raises:
        InvalidSaltError: If the salt shape is invalid
        HashFailureError: If the bcrypt transform fails
        
    Assumptions:
    - A bare body is expanded with settings.bare_salt_cost
    - An invalid salt is never replaced with a generated one
    """
    if not is_valid_salt(salt):
        log_security_event("invalid_salt", reason="unexpected salt shape", length=len(salt))
        raise InvalidSaltError()
    
    if len(salt) == SALT_LENGTH:
        original = Revision.B
        salt = format_salt(original, settings.bare_salt_cost, salt)
    else:
        original = Revision.lookup(salt[:4])
        if original is None:
            raise InvalidSaltError()
    
    if original is Revision.Y:
        normalized = Revision.B.value + salt[original.revision_length:]
    else:
        normalized = salt
    
    hashed = bcrypt_transform(password, normalized)
    log_hash_event("hash_created", revision=original.value, cost=salt[4:6])
    return original.value + hashed[original.revision_length:]


def parse_hash(password_hash: str) -> ParsedHash:
    """Split a stored hash into revision, salt prefix and checksum.
    
    Args:
        password_hash: Stored bcrypt hash
        
    Returns:
        ParsedHash: (revision, 29-char salt prefix, 31-char checksum)
        
    Raises:
        InvalidHashError: If the tag is unknown or either window is short
    """
    revision = Revision.lookup(password_hash[:4])
    if revision is None:
        log_security_event("invalid_hash", reason="unknown revision tag")
        raise InvalidHashError()
    
    salt = password_hash[:revision.full_salt_length]
    if not salt or len(salt) != revision.full_salt_length:
        log_security_event("invalid_hash", reason="salt window too short", length=len(password_hash))
        raise InvalidHashError()
    
    checksum = password_hash[-revision.checksum_length:]
    if not checksum or len(checksum) != revision.checksum_length:
        log_security_event("invalid_hash", reason="checksum window too short", length=len(password_hash))
        raise InvalidHashError()
    
    return ParsedHash(revision=revision, salt=salt, checksum=checksum)
