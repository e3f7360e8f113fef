# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Comparison of secret sequences without early exit.
"""
from typing import Sequence


def secure_compare(a: Sequence, b: Sequence) -> bool:
    """Compare two sequences element by element without early exit.
    
    Every index up to the shorter length is visited regardless of where the
    first difference is. Lengths are checked only after the scan; length is
    not treated as secret.
    
    Args:
        a: First sequence (str, bytes, list, ...)
        b: Second sequence
        
    Returns:
        bool: True if both have equal length and all elements match
    """
    match = True
    for i in range(min(len(a), len(b))):
        if a[i] != b[i]:
            match = False
    
    if len(a) != len(b):
        return False
    return match
