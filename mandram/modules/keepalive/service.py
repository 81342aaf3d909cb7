from supabase import Client
from mandram.modules.keepalive.schemas import KeepaliveResult
from mandram.database.supabase_client import SupabaseNotConfigured
from mandram.core.queries import error_message, utc_now_iso
from typing import Callable, Literal
import logging

logger = logging.getLogger(__name__)

TABLE = "keepalive"
WRITE_MODE = "write"
READ_MODE = "read"

KeepaliveMode = Literal["write", "read"]


class KeepaliveService:
    """Touches the database so the hosted project does not idle out.

    The client is resolved lazily through ``client_factory`` so a missing
    URL/key turns into a failed ping instead of an unhandled error.
    """

    def __init__(self, client_factory: Callable[[], Client]):
        self.client_factory = client_factory

    def ping(self, mode: KeepaliveMode = WRITE_MODE) -> KeepaliveResult:
        try:
            supabase = self.client_factory()
            if mode == READ_MODE:
                return self._read(supabase)
            return self._write(supabase)
        except SupabaseNotConfigured as e:
            logger.error(f"Keepalive skipped: {e}")
            return KeepaliveResult(success=False, error=str(e))
        except Exception as e:
            logger.error(f"Keepalive {mode} failed: {error_message(e)}")
            return KeepaliveResult(success=False, error=error_message(e))

    def _write(self, supabase: Client) -> KeepaliveResult:
        supabase.table(TABLE).upsert({"id": 1, "last_ping": utc_now_iso()}).execute()
        logger.info("Keepalive upsert succeeded")
        return KeepaliveResult(
            success=True,
            status="Supabase kept active",
            timestamp=utc_now_iso(),
        )

    def _read(self, supabase: Client) -> KeepaliveResult:
        result = supabase.table("events").select("id").limit(1).execute()
        logger.info("Keepalive heartbeat succeeded")
        return KeepaliveResult(
            success=True,
            message="Supabase heartbeat successful",
            timestamp=utc_now_iso(),
            data=result.data or [],
        )
