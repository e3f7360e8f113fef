# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
bcryptkit - bcrypt password hashing with a self-describing hash format.
"""
from bcryptkit.compare import secure_compare
from bcryptkit.errors import (
    BcryptError,
    EncodingFailureError,
    HashFailureError,
    InvalidCostError,
    InvalidHashError,
    InvalidSaltError,
)
from bcryptkit.hashing import (
    MAX_COST,
    MIN_COST,
    ParsedHash,
    hash_password,
    hash_password_with_salt,
    parse_hash,
)
from bcryptkit.password import verify_password
from bcryptkit.revision import Revision
from bcryptkit.salt import generate_salt, is_valid_salt

__version__ = "1.0.0"

__all__ = [
    "BcryptError",
    "EncodingFailureError",
    "HashFailureError",
    "InvalidCostError",
    "InvalidHashError",
    "InvalidSaltError",
    "MAX_COST",
    "MIN_COST",
    "ParsedHash",
    "Revision",
    "generate_salt",
    "hash_password",
    "hash_password_with_salt",
    "is_valid_salt",
    "parse_hash",
    "secure_compare",
    "verify_password",
]
