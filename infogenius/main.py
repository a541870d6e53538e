"""
Command-line entry point.

Runs the InfoGenius API with uvicorn.

Dependencies: uvicorn, infogenius.configs
System role: Process launcher
"""

import uvicorn

from infogenius.configs import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "infogenius.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
