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

"""Logger factory and inspection tally.

Collects succeeded/failed/unreadable counts so the inspect command
can print a CI-friendly summary at the end.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class InspectionSummary:
    """Accumulates per-file outcome counts."""

    succeeded: int = 0
    failed: int = 0
    unreadable: int = 0
    first_errors: dict[str, str] = field(default_factory=dict)

    def record(self, name: str, succeeded: bool, first_error: str = "") -> None:
        if succeeded:
            self.succeeded += 1
            return
        self.failed += 1
        if first_error:
            self.first_errors[name] = first_error

    def record_unreadable(self, name: str, reason: str) -> None:
        self.unreadable += 1
        self.first_errors[name] = reason

    @property
    def total(self) -> int:
        return self.succeeded + self.failed + self.unreadable

    def exit_code(self) -> int:
        """0 all succeeded, 1 any failed, 2 any unreadable."""
        if self.unreadable:
            return 2
        if self.failed:
            return 1
        return 0

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Inspection Summary", "=" * 40]
        lines.append(f"outcomes: {self.total}")
        parts = [f"{self.succeeded} succeeded"]
        if self.failed:
            parts.append(f"{self.failed} failed")
        if self.unreadable:
            parts.append(f"{self.unreadable} unreadable")
        lines.append("  ".join(parts))
        for name, message in self.first_errors.items():
            lines.append(f"  {name}: {message}")
        lines.append("=" * 40)
        return "\n".join(lines)
