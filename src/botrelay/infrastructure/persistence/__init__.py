"""Registration storage adapters."""

from botrelay.infrastructure.persistence.in_memory_registration_store import (
    InMemoryRegistrationStore,
)

__all__ = ["InMemoryRegistrationStore"]
