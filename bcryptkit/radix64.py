# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
OpenBSD Radix-64 encoding as used by bcrypt salts.

Same bit packing as standard base64 but with a different alphabet and no
padding: 16 salt bytes encode to 22 characters.
"""
from bcryptkit.errors import EncodingFailureError

ALPHABET = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def encode(data: bytes) -> str:
    """Encode bytes with the bcrypt Radix-64 alphabet.
    
    Args:
        data: Raw bytes (16 bytes for a salt body)
        
    Returns:
        str: Encoded text, ceil(len(data) * 4 / 3) characters
        
    Raises:
        EncodingFailureError: If data is not bytes-like
    """
    try:
        raw = bytes(memoryview(data))
    except TypeError as exc:
        raise EncodingFailureError(
            f"Unable to base64-encode salt of type {type(data).__name__}"
        ) from exc
    
    out = []
    for i in range(0, len(raw), 3):
        chunk = raw[i:i + 3]
        c1 = chunk[0]
        out.append(ALPHABET[c1 >> 2])
        c1 = (c1 & 0x03) << 4
        if len(chunk) == 1:
            out.append(ALPHABET[c1])
            break
        
        c2 = chunk[1]
        out.append(ALPHABET[c1 | (c2 >> 4)])
        c1 = (c2 & 0x0F) << 2
        if len(chunk) == 2:
            out.append(ALPHABET[c1])
            break
        
        c2 = chunk[2]
        out.append(ALPHABET[c1 | (c2 >> 6)])
        out.append(ALPHABET[c2 & 0x3F])
    
    return "".join(out)
