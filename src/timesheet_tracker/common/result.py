from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a strict check: either a value or an error message.

    Admission gates (pickers, range checks) return this instead of raising so
    the form layer can decide when to show the message. Use ``unwrap()`` where
    an exception is the better fit (services, controllers).
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> "Result[T]":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise ValidationError(self.error)
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]
