"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from .app import create_app
from .config import Config
from .logger import setup_logger


def main() -> None:
    """Run the server on the configured host and port."""
    config = Config.from_yaml()
    setup_logger(config)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
