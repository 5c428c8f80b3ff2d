import argparse

import uvicorn

from infrastructure.config.settings import load_settings
from infrastructure.storage.logging.logger import SERVICE_LOGGER_NAME, get_logger
from interfaces.api.routes import create_app


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve price inferences for crypto assets.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0).")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = load_settings()
    logger = get_logger(SERVICE_LOGGER_NAME, level=settings.log_level)

    for name, value in settings.describe().items():
        logger.info("%s: %s", name, value)

    app = create_app(settings=settings)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
