"""
Fetch-backed list state shared by every page section.

A section starts in ``loading``, and each fetch ends in ``populated``,
``empty`` or ``error``. Every ``begin()`` hands out a new request token and
only the newest token may commit, so a slow response from an earlier
year/category selection can never overwrite a newer one.
"""
import inspect
import logging
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from mandram.core.result import Result
from mandram.views.icons import Icon

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ViewStatus(str, Enum):
    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"
    ERROR = "error"


class EmptyPlaceholder(BaseModel):
    icon: Icon
    title: str
    description: str


class ListViewState(Generic[T]):
    def __init__(
        self,
        placeholder: EmptyPlaceholder,
        skeleton_count: int = 3,
        show_error_banner: bool = False,
    ):
        self.placeholder = placeholder
        self.skeleton_count = skeleton_count
        self.show_error_banner = show_error_banner
        self.status = ViewStatus.LOADING
        self.items: List[T] = []
        self.error: Optional[str] = None
        self.params: Dict[str, Any] = {}
        self._latest_token = 0

    @property
    def latest_token(self) -> int:
        return self._latest_token

    def begin(self, **params) -> int:
        """Enter loading for a new request and return its token"""
        self._latest_token += 1
        self.status = ViewStatus.LOADING
        self.params = params
        return self._latest_token

    def commit(self, token: int, result: Result[List[T]]) -> bool:
        """Apply a finished fetch. Returns False when a newer request superseded it."""
        if token != self._latest_token:
            logger.debug(f"Dropping stale response {token} (latest {self._latest_token})")
            return False
        if result.is_ok:
            self.items = list(result.value)
            self.error = None
            self.status = ViewStatus.POPULATED if self.items else ViewStatus.EMPTY
        else:
            self.items = []
            self.error = result.reason
            self.status = ViewStatus.ERROR
        return True

    @property
    def visible_status(self) -> ViewStatus:
        """What the page shows: errors look like an empty list unless the banner is enabled"""
        if self.status == ViewStatus.ERROR and not self.show_error_banner:
            return ViewStatus.EMPTY
        return self.status

    def snapshot(self) -> Dict[str, Any]:
        status = self.visible_status
        snapshot: Dict[str, Any] = {"status": status.value, "items": self.items}
        if status == ViewStatus.LOADING:
            snapshot["skeleton_count"] = self.skeleton_count
        elif status == ViewStatus.EMPTY:
            snapshot["placeholder"] = self.placeholder.model_dump(mode="json")
        elif status == ViewStatus.ERROR:
            snapshot["error"] = self.error
        return snapshot


class ListView(Generic[T]):
    """Binds a fetcher (sync or async, returning a Result) to a ListViewState."""

    def __init__(self, fetcher: Callable[..., Any], state: ListViewState[T]):
        self.fetcher = fetcher
        self.state = state

    async def load(self, **params) -> bool:
        token = self.state.begin(**params)
        if inspect.iscoroutinefunction(self.fetcher):
            result = await self.fetcher(**params)
        else:
            result = await run_in_threadpool(self.fetcher, **params)
        return self.state.commit(token, result)
