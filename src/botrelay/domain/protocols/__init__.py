"""Domain protocols (ports).

Usage:
    from botrelay.domain.protocols import RegistrationStore, UpstreamClientProtocol
"""

from botrelay.domain.protocols.logger_protocol import LoggerProtocol
from botrelay.domain.protocols.registration_store import RegistrationStore
from botrelay.domain.protocols.upstream_protocol import UpstreamClientProtocol

__all__ = ["LoggerProtocol", "RegistrationStore", "UpstreamClientProtocol"]
