"""Run the service with ``python -m commandpal``."""

import uvicorn

from commandpal.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "commandpal.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
