"""
Tagged results for remote queries.

The public ``get_*`` helpers collapse an ``Err`` into an empty list (or
``None``) so a backend outage renders the same empty state as "no rows".
View models keep the ``Result`` so they can tell the two apart.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err:
    reason: str

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, fn: Callable[[Any], Any]) -> "Err":
        return self


Result = Union[Ok[T], Err]
