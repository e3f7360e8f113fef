# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Supported bcrypt algorithm revisions.

Every bcrypt hash starts with a revision tag. Layout constants are shared
by all supported revisions:

    $2b$12$<22-char salt body><31-char checksum>
    |--|     revision tag (4)
    |---------------------------| full salt (29)
"""
from enum import Enum
from typing import Optional

# Length of a bare salt body without revision/cost
SALT_LENGTH = 22


class Revision(str, Enum):
    """Bcrypt revision tag, including both "$" delimiters."""
    
    # Older revision used by some legacy implementations
    A = "$2a$"
    # crypt_blowfish revision, identical to 2b in all but name
    Y = "$2y$"
    # Current revision and the default
    B = "$2b$"
    
    @property
    def revision_length(self) -> int:
        return 4
    
    @property
    def full_salt_length(self) -> int:
        return 29
    
    @property
    def checksum_length(self) -> int:
        return 31
    
    @property
    def hash_length(self) -> int:
        return self.full_salt_length + self.checksum_length
    
    @classmethod
    def lookup(cls, tag: str) -> Optional["Revision"]:
        """Find the revision for an exact 4-character tag.
        
        Args:
            tag: Candidate tag such as "$2b$"
            
        Returns:
            Revision: Matching revision, or None when the tag is unknown
        """
        try:
            return cls(tag)
        except ValueError:
            return None
