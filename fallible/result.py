# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Result pattern for error handling without exceptions.

Provides Outcome (pass/fail plus errors) and ValueOutcome[T] (the same,
carrying a success value) as an alternative to raising exceptions.
Every function that can fail returns one of them.

``succeeded`` is the only authority on the outcome. ``errors`` is advisory:
a successful outcome may carry warnings, a failed one may carry nothing.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fallible.error import Error, as_error

T = TypeVar("T")
A = TypeVar("A")
OutcomeT = TypeVar("OutcomeT", bound="Outcome")


@dataclass(frozen=True, slots=True)
class Outcome:
    """Pass/fail flag plus an ordered tuple of errors."""

    succeeded: bool
    errors: tuple[Error, ...] = ()

    def __post_init__(self) -> None:
        # Any iterable is frozen in insertion order.
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @property
    def first_error(self) -> Error:
        """First error, or an empty-message Error when there are none."""
        return self.errors[0] if self.errors else Error.from_string("")

    # ── Construction ───────────────────────────────────────────

    @classmethod
    def true(cls: type[OutcomeT]) -> OutcomeT:
        return cls(succeeded=True)

    @classmethod
    def false(cls: type[OutcomeT]) -> OutcomeT:
        return cls(succeeded=False)

    @classmethod
    def error(cls: type[OutcomeT], message: Error | str) -> OutcomeT:
        """Failed outcome holding exactly one error."""
        return cls(succeeded=False, errors=(as_error(message),))

    @classmethod
    def from_errors(cls: type[OutcomeT], errors: str | Iterable[Error | str]) -> OutcomeT:
        """Failed outcome holding ``errors`` in order.

        A single string is treated like ``error(message)``.
        """
        if isinstance(errors, str):
            return cls.error(errors)
        return cls(succeeded=False, errors=tuple(as_error(e) for e in errors))

    @classmethod
    def from_bool(cls: type[OutcomeT], succeeded: bool) -> OutcomeT:
        return cls(succeeded=bool(succeeded))

    @classmethod
    def from_error(cls: type[OutcomeT], err: Error | str) -> OutcomeT:
        return cls.error(err)

    @staticmethod
    def create(value: T | None) -> ValueOutcome[T]:
        """Successful outcome for ``value``, failed when ``value`` is None."""
        if value is None:
            return ValueOutcome.false()
        return ValueOutcome.success(value)

    @staticmethod
    def success(value: T) -> ValueOutcome[T]:
        """Successful outcome for ``value``. No None check."""
        return ValueOutcome(succeeded=True, value=value)


@dataclass(frozen=True, slots=True)
class ValueOutcome(Outcome, Generic[T]):
    """Outcome carrying a value of type T when successful.

    ``value`` is only meaningful when ``succeeded`` is true. Read it through
    ``match``, ``is_success``, ``unwrap_or`` or the ``if_successful*``
    combinators rather than directly.
    """

    value: T | None = None

    @classmethod
    def wrap(cls, value: T) -> ValueOutcome[T]:
        """Wrap any value as a success, None included. Unlike ``create``."""
        return cls(succeeded=True, value=value)

    # ── Extraction ─────────────────────────────────────────────

    def is_success(self) -> tuple[bool, T | None]:
        """Return ``(succeeded, value)`` for inline unpacking."""
        return self.succeeded, self.value

    def if_not_success(self) -> tuple[bool, T | None]:
        """Return ``(failed, value)`` for early-exit unpacking."""
        return not self.succeeded, self.value

    def unwrap_or(self, default: T) -> T:
        if self.succeeded:
            return self.value  # type: ignore[return-value]
        return default

    def unwrap_unsafe(self) -> T | None:
        """Return ``value`` without checking ``succeeded``."""
        return self.value

    # ── Combinators ────────────────────────────────────────────

    def if_successful(self, action: Callable[[T], Any]) -> None:
        if self.succeeded:
            action(self.value)  # type: ignore[arg-type]

    def map(self, transform: Callable[[T], A]) -> ValueOutcome[A]:
        """Transform the value on success; carry the errors on failure."""
        if self.succeeded:
            return ValueOutcome(succeeded=True, value=transform(self.value))  # type: ignore[arg-type]
        return ValueOutcome(succeeded=False, errors=self.errors)

    def match(
        self,
        on_success: Callable[[T], A],
        on_failure: Callable[[tuple[Error, ...]], A],
    ) -> A:
        """Call exactly one branch and return its result."""
        if self.succeeded:
            return on_success(self.value)  # type: ignore[arg-type]
        return on_failure(self.errors)

    def if_successful_or_else(
        self,
        on_success: Callable[[T], Any],
        on_failure: Callable[[tuple[Error, ...]], Any],
    ) -> None:
        if self.succeeded:
            on_success(self.value)  # type: ignore[arg-type]
        else:
            on_failure(self.errors)

    async def if_successful_async(self, action: Callable[[T], Awaitable[Any]]) -> None:
        if self.succeeded:
            await action(self.value)  # type: ignore[arg-type]

    async def match_async(
        self,
        on_success: Callable[[T], Awaitable[A]],
        on_failure: Callable[[tuple[Error, ...]], Awaitable[A]],
    ) -> A:
        """Await exactly one branch and return its result."""
        if self.succeeded:
            return await on_success(self.value)  # type: ignore[arg-type]
        return await on_failure(self.errors)

    async def if_successful_async_or_else(
        self,
        on_success: Callable[[T], Awaitable[Any]],
        on_failure: Callable[[tuple[Error, ...]], Any],
    ) -> None:
        """Await ``on_success`` or call ``on_failure`` synchronously."""
        if self.succeeded:
            await on_success(self.value)  # type: ignore[arg-type]
        else:
            on_failure(self.errors)


# ── Conversions ───────────────────────────────────────────────


def into_outcome(value: bool | Error | str | Iterable[Error | str]) -> Outcome:
    """Explicit replacement for the implicit conversions into Outcome.

    bool → ``from_bool``; Error or str → ``from_error``;
    list or tuple of errors → ``from_errors``.
    """
    if isinstance(value, bool):
        return Outcome.from_bool(value)
    if isinstance(value, (Error, str)):
        return Outcome.from_error(value)
    if isinstance(value, (list, tuple)):
        return Outcome.from_errors(value)
    raise TypeError(f"Cannot convert {type(value).__name__} into Outcome")


def into_value_outcome(value: T) -> ValueOutcome[T]:
    """Wrap a plain value as a successful ValueOutcome."""
    return ValueOutcome.wrap(value)
