"""Unified entry point for the user and order services.

This script launches the user service, the order service, or both
concurrently.  It is intended to be executed from the project root,
for example in a container where you only specify a single Python file
to run.

Host, ports and the user service URL used by the order service are
read from environment variables (see ``user_order_api.app.core.config``).

Usage:
    python run.py                   # both services
    python run.py --service users   # user service only
    python run.py --service orders  # order service only
"""
import argparse
import asyncio
import logging

from fastapi import FastAPI
from uvicorn import Config, Server

from user_order_api.app.core.config import settings
from user_order_api.app.core.logging_config import resolve_log_level
from user_order_api.app.main import order_app, user_app

logger = logging.getLogger(__name__)


async def run_service(name: str, app: FastAPI, port: int) -> None:
    """Serve ``app`` with Uvicorn until shutdown.

    A port that cannot be bound makes Uvicorn exit the process.
    """
    logger.info("%s starting on %s:%d", name, settings.host, port)
    config = Config(
        app=app,
        host=settings.host,
        port=port,
        reload=False,
        log_level=resolve_log_level(settings.log_level).lower(),
    )
    server = Server(config)
    await server.serve()


async def main(service: str) -> None:
    """Run the selected services concurrently."""
    coros = []
    if service in ("users", "all"):
        coros.append(run_service("User service", user_app, settings.user_service_port))
    if service in ("orders", "all"):
        coros.append(run_service("Order service", order_app, settings.order_service_port))
    tasks = [asyncio.create_task(coro) for coro in coros]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logger.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the user and/or order record services.")
    parser.add_argument(
        "--service",
        choices=("users", "orders", "all"),
        default="all",
        help="which service to start (default: all)",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    try:
        asyncio.run(main(args.service))
    except KeyboardInterrupt:
        pass
