"""
Success/failure values returned by every service operation.

A service call yields either ``Ok(value)`` or ``Err(error)`` where
``error`` is a :class:`~shoe_store_api.app.core.exceptions.ServiceError`.
Callers branch on the variant (``isinstance`` or ``result.is_ok``)
instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import ServiceError


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error and its human-readable message."""

    error: ServiceError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Ok[T], Err]
