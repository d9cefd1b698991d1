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

"""Wire field names for serialized outcomes.

Loads an optional YAML file into a typed FieldNames dataclass.
Two presets ship built in: snake_case and the PascalCase names used by
the .NET services that emit the same payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from fallible.logger import get_logger
from fallible.result import ValueOutcome

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FieldNames:
    """Key names used when an outcome is written to or read from a dict."""

    succeeded: str = "succeeded"
    errors: str = "errors"
    value: str = "value"
    message: str = "message"
    payload: str = "payload"


DEFAULT_FIELDS = FieldNames()

DOTNET_FIELDS = FieldNames(
    succeeded="IsSuccessful",
    errors="ErrorMessages",
    value="Value",
    message="Message",
    payload="ErrorObject",
)

PRESETS: dict[str, FieldNames] = {
    "default": DEFAULT_FIELDS,
    "dotnet": DOTNET_FIELDS,
}

_KEYS = frozenset(f.name for f in fields(FieldNames))


def field_preset(name: str) -> ValueOutcome[FieldNames]:
    """Look up a built-in preset by name."""
    if name not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        return ValueOutcome.error(f"Unknown field preset '{name}' (known: {known})")
    return ValueOutcome.success(PRESETS[name])


def load_field_names(path: Path) -> ValueOutcome[FieldNames]:
    """Load field names from YAML. Absent keys keep the preset's names.

    Example::

        preset: dotnet
        value: Payload
    """
    if not path.exists():
        return ValueOutcome.error(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        return ValueOutcome.error(f"Cannot decode {path}: {exc.reason}")
    except OSError as exc:
        return ValueOutcome.error(f"Cannot read {path}: {exc.strerror or exc}")

    try:
        raw: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return ValueOutcome.error(f"YAML parse error: {exc}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return ValueOutcome.error(f"Config structure error: expected a mapping in {path}")

    overrides = dict(raw)
    base = field_preset(str(overrides.pop("preset", "default")))
    if base.failed:
        return base

    unknown = sorted(set(overrides) - _KEYS, key=str)
    if unknown:
        return ValueOutcome.from_errors(f"Unknown field key: {key}" for key in unknown)

    bad = [key for key, name in overrides.items() if not isinstance(name, str) or not name]
    if bad:
        return ValueOutcome.from_errors(f"Field '{key}' must be a non-empty string" for key in bad)

    names = replace(base.unwrap_or(DEFAULT_FIELDS), **overrides)
    if len({getattr(names, key) for key in _KEYS}) != len(_KEYS):
        return ValueOutcome.error(f"Field names must be distinct: {names}")

    log.debug("Loaded field names from %s: %s", path, names)
    return ValueOutcome.success(names)


def resolve_field_names(spec: str) -> ValueOutcome[FieldNames]:
    """Resolve a preset name or a path to a YAML file."""
    if spec in PRESETS:
        return field_preset(spec)
    return load_field_names(Path(spec))

