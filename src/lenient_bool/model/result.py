"""Result variants returned by the lenient boolean parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class InvalidInput:
    """The input did not match any accepted boolean spelling."""

    value: Any

    @property
    def message(self) -> str:
        """Return a diagnostic that echoes the rejected input."""
        return f"invalid boolean value: {self.value!r}"


class LenientBoolError(ValueError):
    """Raised by the raising APIs when an :class:`InvalidInput` is unwrapped."""

    def __init__(self, error: InvalidInput, context: str = ""):
        """Wrap ``error`` in an exception.

        :param error: The rejected-input record.
        :param context: Optional prefix naming where the value came from.
        """
        self.error = error
        self.value = error.value
        message = error.message
        if context:
            message = f"{context}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class Ok:
    """Successful parse carrying the resolved boolean."""

    value: bool

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> bool:
        return self.value

    def unwrap_or(self, default: bool) -> bool:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed parse carrying the rejected input."""

    error: InvalidInput

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> bool:
        """Raise the failure as an exception.

        :raises LenientBoolError: Always.
        """
        raise LenientBoolError(self.error)

    def unwrap_or(self, default: bool) -> bool:
        return default


ParseResult = Union[Ok, Err]
