"""Run the API with uvicorn: ``python -m astro``."""
from __future__ import annotations

import uvicorn

from astro.app import create_app
from astro.core.config import get_settings
from astro.core.errors import ConfigurationError
from astro.core.logging import setup_logging


def main() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        raise SystemExit(f"Configuration error: {exc}") from exc
    setup_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
