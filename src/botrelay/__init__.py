"""Bot relay backend.

Relays a small REST surface to the FNLB bot-management API and keeps an
in-memory correlation of alt accounts, bots and categories.
"""

__version__ = "0.1.0"
