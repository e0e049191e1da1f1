"""
orderflow_core.config_enums - Enums related to harness configuration.
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Defines the environments the harness can run against."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"
