"""Validation errors raised by the tally engine."""

from __future__ import annotations

import enum


class InsufficientAlternativesError(ValueError):
    """Raised when fewer than two distinct alternatives are registered."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"not enough alternatives: need at least 2, got {count}")


class BallotErrorKind(enum.Enum):
    INCORRECT_LENGTH = "incorrect_length"
    UNKNOWN_NAME = "unknown_name"
    MISSING_NAME = "missing_name"
    DUPLICATE_NAME = "duplicate_name"


class BallotError(ValueError):
    """
    A ballot rejected by validation.

    One exception type covers every rejection; ``kind`` tells them apart and
    the remaining fields carry whatever payload that kind has:

    - ``INCORRECT_LENGTH``: ``expected`` and ``actual`` ballot lengths.
    - ``UNKNOWN_NAME``: ``name`` not among the registered alternatives.
    - ``MISSING_NAME``: registered ``name`` absent from the ballot.
    - ``DUPLICATE_NAME``: ``name`` and its occurrence ``count``.
    """

    def __init__(
        self,
        kind: BallotErrorKind,
        name: str | None = None,
        count: int | None = None,
        expected: int | None = None,
        actual: int | None = None,
        context: str | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.count = count
        self.expected = expected
        self.actual = actual
        self.context = context
        super().__init__(self._format_message())

    @classmethod
    def incorrect_length(cls, expected: int, actual: int) -> BallotError:
        return cls(BallotErrorKind.INCORRECT_LENGTH, expected=expected, actual=actual)

    @classmethod
    def unknown_name(cls, name: str) -> BallotError:
        return cls(BallotErrorKind.UNKNOWN_NAME, name=name)

    @classmethod
    def missing_name(cls, name: str) -> BallotError:
        return cls(BallotErrorKind.MISSING_NAME, name=name)

    @classmethod
    def duplicate_name(cls, name: str, count: int) -> BallotError:
        return cls(BallotErrorKind.DUPLICATE_NAME, name=name, count=count)

    def with_context(self, context: str) -> BallotError:
        """Return a copy of this error whose message is prefixed by ``context``."""
        if self.context:
            context = f"{context}: {self.context}"
        return type(self)(
            self.kind,
            name=self.name,
            count=self.count,
            expected=self.expected,
            actual=self.actual,
            context=context,
        )

    def _format_message(self) -> str:
        if self.kind is BallotErrorKind.INCORRECT_LENGTH:
            msg = (
                "incorrect number of items in ballot list: "
                f"expected {self.expected}, got {self.actual}"
            )
        elif self.kind is BallotErrorKind.UNKNOWN_NAME:
            msg = f'unknown name "{self.name}" in ballot'
        elif self.kind is BallotErrorKind.MISSING_NAME:
            msg = f'missing name "{self.name}" in ballot'
        else:
            msg = f'name "{self.name}" appears {self.count} times in ballot'
        if self.context:
            msg = f"{self.context}: {msg}"
        return msg


__all__ = [
    "BallotError",
    "BallotErrorKind",
    "InsufficientAlternativesError",
]
