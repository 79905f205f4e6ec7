"""Run the image service: python -m imscale"""

import uvicorn

from .app import create_app
from .common.config import ServiceConfig
from .common.logging import configure_logging


def main() -> None:
    config = ServiceConfig()
    configure_logging(config.log_level)
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
