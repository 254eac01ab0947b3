"""Entry point for serving the Book Manager API.

Starts the FastAPI application under uvicorn.  Host and port default
to the ``HOST`` and ``PORT`` environment variables (see
``book_manager_api.app.core.config``) and can be overridden on the
command line.

Usage:
    python run.py
    python run.py --host 127.0.0.1 --port 9000
"""
import argparse
import asyncio

from uvicorn import Config, Server

from book_manager_api.app.core.config import settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Book Manager API.")
    parser.add_argument("--host", default=settings.host, help="Bind address (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port (default: %(default)s)")
    return parser.parse_args(argv)


async def serve(host: str, port: int) -> None:
    """Run uvicorn until it is stopped."""
    config = Config(
        app="book_manager_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main(argv=None) -> None:
    args = parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
