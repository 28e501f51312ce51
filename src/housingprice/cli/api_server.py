#!/usr/bin/env python
"""
Serve the housing price API.

Usage:
    housingprice-api
    housingprice-api --port 9000 --no-warmup
    python -m housingprice.cli.api_server --host 0.0.0.0 --debug
"""

import argparse
import sys

from housingprice.config import get_config
from housingprice.exceptions import HousingPriceError
from housingprice.logging_config import setup_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="housingprice-api",
        description="Serve /api/status, /api/train, /api/predict and /api/evaluate",
    )
    parser.add_argument("--host", default=config.api.host, help=f"Bind address (default: {config.api.host})")
    parser.add_argument("--port", type=int, default=config.api.port, help=f"Bind port (default: {config.api.port})")
    parser.add_argument("--debug", action="store_true", default=config.api.debug, help="Flask debug mode")
    parser.add_argument(
        "--no-warmup",
        dest="warmup",
        action="store_false",
        default=config.api.train_on_startup,
        help="Start untrained instead of loading or training a model",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: HOUSINGPRICE_LOG_LEVEL)",
    )
    return parser


def main(argv=None):
    """Parse arguments and run the development server until interrupted."""
    args = build_parser().parse_args(argv)

    setup_logging(level=args.log_level, force=True)
    logger = get_logger(__name__)
    logger.info(
        "Housing price API on %s:%d (debug=%s, warmup=%s)",
        args.host, args.port, args.debug, args.warmup,
    )

    from housingprice.api.server import run_server

    try:
        run_server(host=args.host, port=args.port, debug=args.debug, train_on_startup=args.warmup)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except (HousingPriceError, OSError, ValueError) as e:
        logger.error("Could not start server: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
