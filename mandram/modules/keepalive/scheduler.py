import asyncio
import logging
from mandram.config import settings
from mandram.database.supabase_client import get_service_supabase
from mandram.modules.keepalive.service import KeepaliveService

logger = logging.getLogger(__name__)


async def run_keepalive_once(service: KeepaliveService = None):
    """Ping the database once without blocking the event loop"""
    service = service or KeepaliveService(get_service_supabase)
    result = await asyncio.to_thread(service.ping, settings.keepalive_mode)
    if result.success:
        logger.debug(f"Keepalive ok at {result.timestamp}")
    else:
        logger.warning(f"Keepalive failed: {result.error}")
    return result


async def keepalive_loop(interval_seconds: int, service: KeepaliveService = None):
    """Background task that periodically touches the database"""
    while True:
        try:
            await run_keepalive_once(service)
        except Exception as e:
            logger.error(f"Error in keepalive loop: {str(e)}")

        await asyncio.sleep(interval_seconds)
