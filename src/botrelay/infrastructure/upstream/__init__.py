"""Upstream (FNLB API) adapters.

Exports:
    ResilientFetcher: GET with bounded retry on 429
    FnlbClient: Bot and category listings built on the fetcher
"""

from botrelay.infrastructure.upstream.fnlb_client import FnlbClient
from botrelay.infrastructure.upstream.resilient_fetcher import ResilientFetcher

__all__ = ["FnlbClient", "ResilientFetcher"]
