"""Uniform outcome type returned by the external-service adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failure reported by an external service, with its own code and message."""

    code: str
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]

NOT_CONFIGURED = "not_configured"


def not_configured(service: str) -> Err:
    return Err(code=NOT_CONFIGURED, message=f"{service} not initialized")
