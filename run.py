"""Entry point for the Event RSVP API.

Starts the FastAPI application with Uvicorn.  Configuration such as
the token secrets, database path and cookie attributes is read from
environment variables (see ``event_rsvp_api.app.core.config``).

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from event_rsvp_api.app.core.config import Settings
from event_rsvp_api.app.main import create_app


def main() -> None:
    """Serve the API.

    Host and port are read from environment variables `API_HOST` and
    `API_PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    app = create_app(Settings.from_env())
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
