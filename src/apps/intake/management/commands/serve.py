"""Run the ASGI application under uvicorn."""

import logging

from django.conf import settings
from django.core.management.base import BaseCommand

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Serve the intake API and request form on the configured PORT."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--host", default="0.0.0.0")  # noqa: S104
        parser.add_argument("--port", type=int, default=None, help="Defaults to the PORT setting.")

    def handle(self, *args, **options) -> None:
        import uvicorn

        port = options["port"] or settings.PORT
        logger.info("Server running on http://localhost:%s", port)
        uvicorn.run("config.asgi:application", host=options["host"], port=port)
