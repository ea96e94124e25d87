#!/usr/bin/env python3
"""Simple Puppy: Single entry point.

Checks the Petfinder credentials and launches the FastAPI web UI for
searching adoptable dogs.

Usage:
    python main.py
    python main.py --port 8000
    python main.py --skip-check         # don't contact Petfinder on startup
    python main.py --no-browser
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
import time
import webbrowser

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger("simple-puppy")


def _open_browser(url: str, delay: float = 2.0) -> None:
    """Open browser after a delay to give the server time to start.

    Args:
        url: URL to open in the browser.
        delay: Seconds to wait before opening.
    """
    def _delayed_open():
        time.sleep(delay)
        logger.info("Opening browser at %s", url)
        webbrowser.open(url)

    thread = threading.Thread(target=_delayed_open, daemon=True)
    thread.start()


def main() -> None:
    """Check Petfinder access, then serve the web UI."""
    from src.config import get_config

    config = get_config()

    parser = argparse.ArgumentParser(description="Simple Puppy dog search")
    parser.add_argument(
        "--port", type=int, default=config.port, help="Server port"
    )
    parser.add_argument(
        "--host", type=str, default=config.host, help="Server host"
    )
    parser.add_argument(
        "--skip-check",
        action="store_true",
        help="Do not verify Petfinder access before starting",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser window",
    )
    args = parser.parse_args()

    # Step 1: Petfinder credentials
    logger.info("Step 1/2: Checking Petfinder API at %s", config.petfinder_base_url)
    if not config.petfinder_api_key or not config.petfinder_secret:
        logger.error(
            "Petfinder credentials missing. "
            "Set PETFINDER_API_KEY and PETFINDER_SECRET in .env."
        )
        sys.exit(1)

    if not args.skip_check:
        from src.petfinder.client import PetfinderClient

        client = PetfinderClient(
            api_key=config.petfinder_api_key,
            secret=config.petfinder_secret,
            base_url=config.petfinder_base_url,
            timeout=config.request_timeout,
        )
        if not client.ping():
            logger.warning(
                "Petfinder API not reachable with the configured credentials. "
                "Searches will fail until it is."
            )
        client.close()
    else:
        logger.info("Skipping Petfinder check (--skip-check)")

    # Step 2: Launch FastAPI server
    logger.info("Step 2/2: Launching web UI on %s:%d", args.host, args.port)
    import uvicorn

    from src.api.app import create_app

    app = create_app()

    if not args.no_browser:
        _open_browser(f"http://localhost:{args.port}")

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
