"""
Main entrypoint for the national parks synchronization service.

Usage:
    python main.py parks     # synchronize parks, campgrounds and images once
    python main.py weather   # refresh the forecast of every stored park
    python main.py alerts    # rebuild the alert table
    python main.py serve     # run the API (set ENABLE_SCHEDULER=true for the weekly sync)
"""
import argparse
import logging

import uvicorn

from src.config import configure_logging
from src.db.database import create_tables

logger = logging.getLogger(__name__)

def main(argv=None):
    """
    Main function to run a job or serve the API.
    """
    parser = argparse.ArgumentParser(description="National parks synchronization")
    parser.add_argument("job", choices=["parks", "weather", "alerts", "serve"])
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    configure_logging()

    if args.job == "serve":
        uvicorn.run("src.api.app:app", host=args.host, port=args.port)
        return 0

    try:
        # Initialize database tables
        create_tables()

        if args.job == "parks":
            from src.sync.scheduler import run_park_sync
            summary = run_park_sync()
            logger.info(f"Park sync finished: {summary}")
        elif args.job == "weather":
            from src.sync.weather import fetch_and_store_weather
            updated = fetch_and_store_weather()
            logger.info(f"Weather updated for {updated} parks")
        else:
            from src.sync.alerts import fetch_alerts
            stored = fetch_alerts()
            logger.info(f"Stored {stored} alerts")

        return 0
    except Exception as e:
        logger.error(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
    raise SystemExit(exit_code)
