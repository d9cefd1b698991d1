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

"""Serialization boundary: outcomes to and from dict, JSON and YAML.

Only primary fields are written: succeeded, errors and (for ValueOutcome)
value. Derived accessors such as ``first_error`` never reach the wire.

Decoding is the one place where an outcome is assembled from zero values:
keys missing from the input fall back to False, no errors and None.
Every function here reports problems as a failed outcome instead of raising.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from fallible.config import DEFAULT_FIELDS, FieldNames
from fallible.error import Error
from fallible.logger import get_logger
from fallible.result import Outcome, ValueOutcome

log = get_logger(__name__)

FORMATS = ("auto", "json", "yaml")


# ── Dict ──────────────────────────────────────────────────────


def _error_to_dict(err: Error, fields: FieldNames) -> dict[str, Any]:
    return {fields.message: err.message, fields.payload: err.payload}


def to_dict(outcome: Outcome, fields: FieldNames = DEFAULT_FIELDS) -> dict[str, Any]:
    """Render the primary fields of an outcome as a plain dict.

    Values and payloads pass through untouched. Only JSON-safe ones survive
    a text round-trip unchanged: tuples come back as lists and non-string
    dict keys come back as strings after JSON.
    """
    data: dict[str, Any] = {
        fields.succeeded: outcome.succeeded,
        fields.errors: [_error_to_dict(e, fields) for e in outcome.errors],
    }
    if isinstance(outcome, ValueOutcome):
        data[fields.value] = outcome.value
    return data


def _error_from_raw(raw: Any, index: int, fields: FieldNames) -> ValueOutcome[Error]:
    if isinstance(raw, str):
        return ValueOutcome.success(Error.from_string(raw))
    if not isinstance(raw, Mapping):
        return ValueOutcome.error(
            f"Error entry {index} must be a string or mapping, got {type(raw).__name__}"
        )
    message = raw.get(fields.message)
    if message is not None and not isinstance(message, str):
        return ValueOutcome.error(f"Error entry {index}: '{fields.message}' must be a string")
    return ValueOutcome.success(Error(message=message, payload=raw.get(fields.payload)))


def from_dict(data: Any, fields: FieldNames = DEFAULT_FIELDS) -> ValueOutcome[Outcome]:
    """Build an Outcome, or a ValueOutcome when the value key is present."""
    if not isinstance(data, Mapping):
        return ValueOutcome.error(f"Expected a mapping, got {type(data).__name__}")

    problems: list[str] = []

    succeeded = data.get(fields.succeeded, False)
    if not isinstance(succeeded, bool):
        problems.append(f"'{fields.succeeded}' must be a boolean")

    raw_errors = data.get(fields.errors)
    if raw_errors is None:
        raw_errors = []
    errors: list[Error] = []
    if not isinstance(raw_errors, (list, tuple)):
        problems.append(f"'{fields.errors}' must be a list")
    else:
        for index, raw in enumerate(raw_errors):
            parsed = _error_from_raw(raw, index, fields)
            if parsed.succeeded:
                errors.append(parsed.unwrap_or(Error()))
            else:
                problems.extend(str(e) for e in parsed.errors)

    if problems:
        log.debug("Rejected outcome document: %s", "; ".join(problems))
        return ValueOutcome.from_errors(problems)

    outcome: Outcome
    if fields.value in data:
        outcome = ValueOutcome(succeeded=succeeded, errors=errors, value=data[fields.value])
    else:
        outcome = Outcome(succeeded=succeeded, errors=errors)
    return ValueOutcome.success(outcome)


# ── JSON ──────────────────────────────────────────────────────


def dumps_json(
    outcome: Outcome,
    fields: FieldNames = DEFAULT_FIELDS,
    indent: int | None = None,
) -> ValueOutcome[str]:
    try:
        text = json.dumps(to_dict(outcome, fields), ensure_ascii=False, indent=indent)
    except (TypeError, ValueError) as exc:
        return ValueOutcome.error(f"JSON encode error: {exc}")
    return ValueOutcome.success(text)


def loads_json(text: str, fields: FieldNames = DEFAULT_FIELDS) -> ValueOutcome[Outcome]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        return ValueOutcome.error(f"JSON parse error: {exc}")
    return from_dict(data, fields)


# ── YAML ──────────────────────────────────────────────────────


def dumps_yaml(outcome: Outcome, fields: FieldNames = DEFAULT_FIELDS) -> ValueOutcome[str]:
    try:
        text = yaml.safe_dump(
            to_dict(outcome, fields),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    except yaml.YAMLError as exc:
        return ValueOutcome.error(f"YAML encode error: {exc}")
    return ValueOutcome.success(text)


def loads_yaml(text: str, fields: FieldNames = DEFAULT_FIELDS) -> ValueOutcome[Outcome]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return ValueOutcome.error(f"YAML parse error: {exc}")
    return from_dict(data, fields)


# ── Files ─────────────────────────────────────────────────────


def _detect_format(path: Path) -> str:
    return "json" if path.suffix.lower() == ".json" else "yaml"


def load_outcome(
    path: Path,
    fields: FieldNames = DEFAULT_FIELDS,
    fmt: str = "auto",
) -> ValueOutcome[Outcome]:
    """Read a serialized outcome from disk.

    ``fmt="auto"`` picks JSON for ``.json`` files and YAML otherwise.
    """
    if fmt not in FORMATS:
        return ValueOutcome.error(f"Unknown format '{fmt}' (known: {', '.join(FORMATS)})")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        return ValueOutcome.error(f"Cannot decode {path}: {exc.reason}")
    except OSError as exc:
        return ValueOutcome.error(f"Cannot read {path}: {exc.strerror or exc}")

    if fmt == "auto":
        fmt = _detect_format(path)
    loader = loads_json if fmt == "json" else loads_yaml
    return loader(text, fields)
