"""Run the relay with uvicorn: ``python -m botrelay``."""

import uvicorn

from botrelay.core.config import get_settings


def main() -> None:
    """Start the HTTP server using host/port from settings."""
    settings = get_settings()
    uvicorn.run(
        "botrelay.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
