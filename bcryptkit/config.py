# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Configuration management for bcryptkit.

This module handles library configuration from environment variables.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bcryptkit.revision import Revision


class Settings(BaseSettings):
    """Library settings loaded from environment variables.
    
    Assumptions:
    - Environment variables (BCRYPTKIT_*) override defaults
    - Costs are log2 rounds and share the hashing bounds
    - default_revision must be one of the supported tags
    """
    
    # Hashing
    default_cost: int = Field(default=12, ge=4, le=31)
    default_revision: str = "$2b$"
    bare_salt_cost: int = Field(default=12, ge=4, le=31)
    
    # Logging
    log_level: str = "INFO"
    log_json: bool = True
    
    model_config = SettingsConfigDict(
        env_prefix="BCRYPTKIT_",
        env_file=".env",
        case_sensitive=False
    )
    
    @field_validator("default_revision")
    @classmethod
    def validate_default_revision(cls, value: str) -> str:
        if Revision.lookup(value) is None:
            raise ValueError(f"Unsupported bcrypt revision: {value!r}")
        return value


settings = Settings()
