"""Commands (CQRS write operations).

Usage:
    from botrelay.application.commands import RegisterBot
"""

from botrelay.application.commands.registration_commands import RegisterBot

__all__ = ["RegisterBot"]
