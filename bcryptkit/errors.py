# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Exceptions raised by bcryptkit operations.

Input-shape errors also derive from ValueError so callers that already
catch ValueError keep working.
"""
from typing import Optional


class BcryptError(Exception):
    """Base class for all bcrypt errors.
    
    str(error) renders as "Bcrypt error: <reason>".
    """
    
    reason = "Unknown bcrypt error"
    
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.reason)
    
    def __str__(self) -> str:
        return f"Bcrypt error: {self.args[0]}"


class InvalidCostError(BcryptError, ValueError):
    """The supplied cost factor is outside the allowed range."""
    
    reason = "Cost should be between 4 and 31"


class InvalidSaltError(BcryptError, ValueError):
    """The supplied salt is malformed or has an unexpected length/revision."""
    
    reason = "Provided salt has incorrect format"


class InvalidHashError(BcryptError, ValueError):
    """The supplied hash is malformed (unknown revision, short salt or checksum)."""
    
    reason = "Invalid hash formatting"


class HashFailureError(BcryptError):
    """The underlying bcrypt transform failed."""
    
    reason = "Unable to compute hash"


class EncodingFailureError(BcryptError):
    """Radix-64 encoding of salt bytes failed."""
    
    reason = "Unable to base64-encode salt"
