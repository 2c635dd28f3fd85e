"""Domain entities.

Usage:
    from botrelay.domain.entities import Bot, Category, Registration
"""

from botrelay.domain.entities.bot import Bot
from botrelay.domain.entities.category import Category
from botrelay.domain.entities.registration import Registration

__all__ = ["Bot", "Category", "Registration"]
