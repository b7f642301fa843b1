"""Run the completion API under uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from completion_api.api.main import build_completer, create_app
from completion_api.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Fail at startup, not on the first request, when the key is missing.
    completer = build_completer(settings)
    app = create_app(settings, completer=completer)

    logger.info("Starting server on http://%s:%s", settings.host, settings.port)
    logger.info("POST endpoint: http://%s:%s/completion", settings.host, settings.port)
    logger.info("Static files served from %s", settings.static_dir_path)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
