# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging utilities for bcryptkit.

Provides specialized logging functions for:
- Hash events (operational, debug level)
- Security events (rejected input, failed verification)

Assumptions:
- All logs use structlog for structured output
- Plaintext, salts and checksums are never logged
"""
from typing import Any, Dict, Optional

from bcryptkit.logging_config import get_logger

hash_logger = get_logger("bcryptkit.hashing")
security_logger = get_logger("bcryptkit.security")

SENSITIVE_FIELDS = {"password", "plaintext", "salt", "checksum", "hash", "secret", "token"}


def log_hash_event(event: str, **kwargs: Any) -> None:
    """Log a hashing operational event.
    
    Args:
        event: Event name (e.g., "hash_created", "hash_verified")
        **kwargs: Additional context (revision, cost)
    """
    hash_logger.debug(event, **_sanitize_data(kwargs))


def log_security_event(
    event: str,
    reason: Optional[str] = None,
    **kwargs: Any
) -> None:
    """Log a security event for forensics.
    
    Args:
        event: Security event type (invalid_hash, checksum_mismatch, etc.)
        reason: Reason for security event
        **kwargs: Additional context
        
    Assumptions:
    - Used for rejected costs, salts, hashes and failed verifications
    - Sensitive keyword values are redacted
    """
    security_logger.warning(
        event,
        reason=reason,
        **_sanitize_data(kwargs)
    )


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize sensitive data from log entries.
    
    Args:
        data: Dictionary that may contain sensitive data
        
    Returns:
        Dict: Sanitized dictionary with sensitive fields redacted
    """
    if not data:
        return data
    
    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, dict):
            sanitized[key] = _sanitize_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                _sanitize_data(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value
    
    return sanitized
