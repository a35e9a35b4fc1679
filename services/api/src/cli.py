"""CLI entrypoint for the civic data API"""
import argparse
import logging
import sys

import uvicorn

from shared.utils.config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the API server."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Serve normalized federal, state and city legislative data"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help=f"Interface to bind (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        default=False,
        help="Reload on code changes (development only, default: False)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args()

    # Setup logging
    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        uvicorn.run(
            "services.api.src.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level.lower(),
        )
        sys.exit(0)
    except Exception as e:
        logger.error(f"Server failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
