"""Application environment types.

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed relay, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
