"""Readable parse errors: what was unexpected, what was expected, and where."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class InfoKind(Enum):
    """What an :class:`Info` holds."""

    TOKEN = "token"
    RANGE = "range"
    MESSAGE = "message"


@dataclass(frozen=True)
class Info:
    """A token, a range of tokens or a message describing part of an error."""

    kind: InfoKind
    value: Any

    def __str__(self) -> str:
        if self.kind is InfoKind.MESSAGE:
            return str(self.value)
        return f"`{self.value}`"

    def map_token(self, f: Callable[[Any], Any]) -> Info:
        """Apply ``f`` to the value if this is a token."""
        if self.kind is InfoKind.TOKEN:
            return Info(self.kind, f(self.value))
        return self

    def map_range(self, f: Callable[[Any], Any]) -> Info:
        """Apply ``f`` to the value if this is a range."""
        if self.kind is InfoKind.RANGE:
            return Info(self.kind, f(self.value))
        return self


class ErrorKind(Enum):
    """The role an :class:`Error` plays in a parse failure."""

    UNEXPECTED = "unexpected"
    EXPECTED = "expected"
    MESSAGE = "message"
    OTHER = "other"


@dataclass(frozen=True, eq=False)
class Error:
    """One piece of information about a parse failure.

    Errors of kind ``OTHER`` wrap an exception and never compare equal.
    """

    kind: ErrorKind
    info: Info | None = None
    cause: BaseException | None = None

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.kind is not ErrorKind.OTHER
            and self.info == other.info
        )

    def __str__(self) -> str:
        if self.kind is ErrorKind.UNEXPECTED:
            return f"Unexpected {self.info}"
        if self.kind is ErrorKind.EXPECTED:
            return f"Expected {self.info}"
        if self.kind is ErrorKind.MESSAGE:
            return str(self.info)
        return str(self.cause)

    @classmethod
    def unexpected_token(cls, token: Any) -> Error:
        return cls(ErrorKind.UNEXPECTED, Info(InfoKind.TOKEN, token))

    @classmethod
    def unexpected_range(cls, items: Any) -> Error:
        return cls(ErrorKind.UNEXPECTED, Info(InfoKind.RANGE, items))

    @classmethod
    def unexpected_message(cls, message: Any) -> Error:
        return cls(ErrorKind.UNEXPECTED, Info(InfoKind.MESSAGE, str(message)))

    @classmethod
    def expected_token(cls, token: Any) -> Error:
        return cls(ErrorKind.EXPECTED, Info(InfoKind.TOKEN, token))

    @classmethod
    def expected_range(cls, items: Any) -> Error:
        return cls(ErrorKind.EXPECTED, Info(InfoKind.RANGE, items))

    @classmethod
    def expected_message(cls, message: Any) -> Error:
        return cls(ErrorKind.EXPECTED, Info(InfoKind.MESSAGE, str(message)))

    @classmethod
    def message_token(cls, token: Any) -> Error:
        return cls(ErrorKind.MESSAGE, Info(InfoKind.TOKEN, token))

    @classmethod
    def message_range(cls, items: Any) -> Error:
        return cls(ErrorKind.MESSAGE, Info(InfoKind.RANGE, items))

    @classmethod
    def message(cls, message: Any) -> Error:
        return cls(ErrorKind.MESSAGE, Info(InfoKind.MESSAGE, str(message)))

    @classmethod
    def other(cls, err: BaseException) -> Error:
        return cls(ErrorKind.OTHER, cause=err)

    @classmethod
    def end_of_input(cls) -> Error:
        return cls.unexpected_message("end of input")

    def is_unexpected_end_of_input(self) -> bool:
        return self == Error.end_of_input()

    def map_token(self, f: Callable[[Any], Any]) -> Error:
        if self.info is None:
            return self
        return Error(self.kind, self.info.map_token(f), self.cause)

    def map_range(self, f: Callable[[Any], Any]) -> Error:
        if self.info is None:
            return self
        return Error(self.kind, self.info.map_range(f), self.cause)


def format_errors(errors: Iterable[Error]) -> str:
    """Describe ``errors``: unexpected first, then expected as a list, then messages."""
    errors = list(errors)
    lines = [f"{e}\n" for e in errors if e.kind is ErrorKind.UNEXPECTED]

    expected = [e.info for e in errors if e.kind is ErrorKind.EXPECTED]
    if expected:
        last = len(expected) - 1
        parts = []
        for i, info in enumerate(expected):
            if i == 0:
                prefix = "Expected"
            elif i < last:
                prefix = ","
            else:
                prefix = " or"
            parts.append(f"{prefix} {info}")
        lines.append("".join(parts) + "\n")

    lines.extend(
        f"{e}\n" for e in errors if e.kind in (ErrorKind.MESSAGE, ErrorKind.OTHER)
    )
    return "".join(lines)


class Errors(Exception):
    """All the errors that occurred at one position."""

    def __init__(self, position: Any, errors: Iterable[Error] = ()) -> None:
        self.position = position
        self.errors = list(errors)
        super().__init__(position, self.errors)

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self.position == other.position and self.errors == other.errors

    def __repr__(self) -> str:
        return f"Errors(position={self.position!r}, errors={self.errors!r})"

    def __str__(self) -> str:
        return f"Parse error at {self.position}\n" + format_errors(self.errors)

    @classmethod
    def single(cls, position: Any, error: Error) -> Errors:
        return cls(position, [error])

    @classmethod
    def empty(cls, position: Any) -> Errors:
        return cls(position, [])

    @classmethod
    def end_of_input(cls, position: Any) -> Errors:
        return cls(position, [Error.end_of_input()])

    def add_error(self, error: Error) -> None:
        """Add ``error`` unless an equal error is already present."""
        if all(existing != error for existing in self.errors):
            self.errors.append(error)

    def set_expected(self, info: Info) -> None:
        """Replace every expected error with one expecting ``info``."""
        self.clear_expected()
        self.errors.append(Error(ErrorKind.EXPECTED, info))

    def clear_expected(self) -> None:
        self.errors = [e for e in self.errors if e.kind is not ErrorKind.EXPECTED]

    def merge(self, other: Errors) -> Errors:
        """Keep the errors furthest ahead; at equal positions combine both."""
        if self.position < other.position:
            return other
        if other.position < self.position:
            return self
        for error in other.errors:
            self.add_error(error)
        return self

    def map_position(self, f: Callable[[Any], Any]) -> Errors:
        return Errors(f(self.position), self.errors)

    def map_token(self, f: Callable[[Any], Any]) -> Errors:
        return Errors(self.position, [e.map_token(f) for e in self.errors])

    def map_range(self, f: Callable[[Any], Any]) -> Errors:
        return Errors(self.position, [e.map_range(f) for e in self.errors])

    def is_unexpected_end_of_input(self) -> bool:
        return any(e.is_unexpected_end_of_input() for e in self.errors)