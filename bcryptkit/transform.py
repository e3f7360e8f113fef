# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Bridge to the bcrypt core transform.

The Blowfish key schedule lives in the bcrypt package; this module only
converts between text and bytes and maps its failures to HashFailureError.
"""
from typing import Union

import bcrypt

from bcryptkit.errors import HashFailureError
from bcryptkit.logging_utils import log_security_event


def bcrypt_transform(password: Union[str, bytes], salt: str) -> str:
    """Run bcrypt over a password and a full $2a$/$2b$ salt.
    
    Args:
        password: Plaintext (str is UTF-8 encoded)
        salt: Normalized full salt
        
    Returns:
        str: 60-character hash whose tag mirrors the salt's tag
        
    Raises:
        HashFailureError: If bcrypt rejects the input
    """
    try:
        password_bytes = password.encode('utf-8') if isinstance(password, str) else password
        hashed = bcrypt.hashpw(password_bytes, salt.encode('ascii'))
    except (ValueError, TypeError) as exc:
        log_security_event("hash_failure", reason=str(exc))
        raise HashFailureError(f"Unable to compute hash: {exc}") from exc
    return hashed.decode('ascii')
