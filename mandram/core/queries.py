from datetime import datetime, timezone
from typing import Any, List, Optional, Type, TypeVar
from pydantic import BaseModel
from mandram.core.result import Ok, Err, Result
import logging

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """ISO timestamp used for date range filters; taken at call time unless given."""
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.isoformat()


def error_message(exc: Exception) -> str:
    """Best human-readable message for a postgrest/httpx/other error."""
    message = getattr(exc, "message", None)
    return message if isinstance(message, str) and message else str(exc)


def execute_rows(query: Any, model: Type[M], description: str) -> Result[List[M]]:
    """Run a built query and parse every row. Any failure is logged and returned as Err."""
    try:
        result = query.execute()
        rows = result.data if result is not None and result.data else []
        return Ok([model(**row) for row in rows])
    except Exception as e:
        logger.error(f"Error fetching {description}: {error_message(e)}")
        return Err(error_message(e))


def execute_maybe_one(query: Any, model: Type[M], description: str) -> Result[Optional[M]]:
    """Run a ``maybe_single`` query; a missing row is Ok(None)."""
    try:
        result = query.execute()
        # postgrest returns None instead of a response when no row matched
        if result is None or not result.data:
            return Ok(None)
        data = result.data[0] if isinstance(result.data, list) else result.data
        return Ok(model(**data))
    except Exception as e:
        logger.error(f"Error fetching {description}: {error_message(e)}")
        return Err(error_message(e))


def execute_count(query: Any, description: str) -> Result[int]:
    """Run a ``select(..., count="exact")`` query and return the row count."""
    try:
        result = query.execute()
        if result.count is not None:
            return Ok(result.count)
        return Ok(len(result.data or []))
    except Exception as e:
        logger.error(f"Error counting {description}: {error_message(e)}")
        return Err(error_message(e))


def execute_insert(query: Any, description: str) -> Result[dict]:
    """Run an insert/upsert and return the first returned row."""
    try:
        result = query.execute()
        if not result.data:
            return Err(f"Failed to create {description}")
        return Ok(result.data[0])
    except Exception as e:
        logger.error(f"Error creating {description}: {error_message(e)}")
        return Err(error_message(e))
