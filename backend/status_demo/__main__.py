"""Run the status demo server with uvicorn.

Usage:
    python -m status_demo
    PORT=8080 status-demo
"""

import uvicorn

from status_demo.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "status_demo.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
