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

"""Error descriptor carried by failed outcomes.

An Error wraps either a human-readable message or an opaque payload object.
No codes and no hierarchy. The message is what callers see.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Error:
    """Immutable error descriptor: a message or an attached payload."""

    message: str | None = None
    payload: Any = None

    @classmethod
    def from_string(cls, message: str) -> Error:
        return cls(message=message)

    @classmethod
    def from_object(cls, payload: Any) -> Error:
        """Attach an arbitrary object. Renders as an empty string."""
        return cls(payload=payload)

    def __str__(self) -> str:
        return self.message or ""


def error(message: str) -> Error:
    """Shorthand for ``Error.from_string``."""
    return Error.from_string(message)


def as_error(value: Error | str | Any) -> Error:
    """Convert a plain value into an Error.

    Strings become message errors, Errors pass through unchanged and any
    other object is attached as a payload.
    """
    if isinstance(value, Error):
        return value
    if isinstance(value, str):
        return Error.from_string(value)
    return Error.from_object(value)
