"""Entry point for the Library Management API."""

from library_api import create_app
from library_api.config import Config


def main() -> None:
    """Build the app from the environment-derived config and serve it."""
    config = Config()
    app = create_app(config)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
