"""
One-shot keepalive for external schedulers (cron, CI).

Usage:
    python -m mandram.scripts.heartbeat [--mode write|read]

Exits with status 1 when the ping fails.
"""
import argparse
import logging
import sys

from mandram.config import settings
from mandram.database.supabase_client import get_service_supabase
from mandram.modules.keepalive.service import KeepaliveService, READ_MODE, WRITE_MODE

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Ping Supabase so the project is not paused")
    parser.add_argument("--mode", choices=[WRITE_MODE, READ_MODE], default=settings.keepalive_mode)
    args = parser.parse_args(argv)

    logger.info("Pinging Supabase...")
    result = KeepaliveService(get_service_supabase).ping(args.mode)
    if not result.success:
        logger.error(f"Heartbeat failed: {result.error}")
        return 1
    logger.info(f"Supabase heartbeat successful at {result.timestamp}")
    if result.data is not None:
        logger.info(f"Data received: {result.data}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
