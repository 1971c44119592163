"""Entry point: serve the build server API with uvicorn."""

from __future__ import annotations

import uvicorn

from buildserver_service.app.main import create_app
from buildserver_service.core.settings import get_app_settings, get_logging_settings

app = create_app()


def run() -> None:
    settings = get_app_settings()
    log_settings = get_logging_settings()

    uvicorn.run(
        "buildserver_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )


if __name__ == "__main__":
    run()
