#!/usr/bin/env python
"""
Run the Recipe Share API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode

Set SSL=1 with CERT_LOCATION and CERT_KEY_LOCATION to serve https.
"""

import argparse
import logging
import sys

import uvicorn

from shared.config import get_settings

logger = logging.getLogger("run_api")


def main():
    parser = argparse.ArgumentParser(description="Run Recipe Share API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tls = {}
    if settings.ssl:
        if not settings.cert_location or not settings.cert_key_location:
            logger.error("SSL is enabled but CERT_LOCATION or CERT_KEY_LOCATION is not set")
            sys.exit(1)
        tls = {
            "ssl_certfile": settings.cert_location,
            "ssl_keyfile": settings.cert_key_location,
        }

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
        **tls,
    )


if __name__ == "__main__":
    main()
