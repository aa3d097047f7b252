from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from data.errors import DashboardDataError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: bool = True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    ok: bool = False

    @classmethod
    def from_exception(cls, exc: DashboardDataError) -> "Err":
        return cls(kind=exc.kind, message=str(exc))


Result = Union[Ok[T], Err]
