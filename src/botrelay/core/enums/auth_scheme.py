"""Upstream Authorization header schemes.

The FNLB API has been observed accepting both a raw API key and a
Bearer-prefixed key. The scheme is a deployment setting; the relay never
guesses between them.
"""

from enum import Enum


class AuthScheme(str, Enum):
    """How the upstream credential is written into the Authorization header."""

    RAW = "raw"
    BEARER = "bearer"
