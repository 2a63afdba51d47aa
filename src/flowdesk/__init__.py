import logging

import uvicorn

from flowdesk.app import create_app
from flowdesk.config import Settings

_settings = Settings()

logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Expose app for Gunicorn: gunicorn flowdesk:app --worker-class uvicorn.workers.UvicornWorker
app = create_app(_settings)


def main() -> None:
    """Debug/development entry point using uvicorn directly."""
    uvicorn.run("flowdesk:app", host=_settings.host, port=_settings.port)
