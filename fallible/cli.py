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

"""Inspect serialized outcomes from the command line.

Reads one or more JSON/YAML outcome documents, logs a line per document
and finishes with a summary block. Exit code: 0 all succeeded,
1 any failed, 2 any file unreadable.

Usage:
    fallible-inspect reports/*.json
    fallible-inspect --fields dotnet response.json
    fallible-inspect --fields fields.yaml --format yaml out.txt
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fallible.config import resolve_field_names
from fallible.logger import InspectionSummary, get_logger
from fallible.serialization import FORMATS, load_outcome

log = get_logger("inspect")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fallible-inspect",
        description="Report on serialized success/failure outcomes",
    )
    parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Outcome documents (JSON or YAML)",
    )
    parser.add_argument(
        "--fields",
        default="default",
        help="Field preset (default, dotnet) or path to a field-names YAML file",
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="auto",
        help="Input format (default: from file suffix)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    fields_result = resolve_field_names(args.fields)
    if fields_result.failed:
        for err in fields_result.errors:
            log.error(str(err))
        return 2
    fields = fields_result.unwrap_unsafe()

    summary = InspectionSummary()

    for path in args.files:
        loaded = load_outcome(path, fields=fields, fmt=args.fmt)
        if loaded.failed:
            reason = str(loaded.first_error)
            log.error("%s: unreadable: %s", path, reason)
            summary.record_unreadable(str(path), reason)
            continue

        outcome = loaded.unwrap_unsafe()
        state = "succeeded" if outcome.succeeded else "failed"
        log.info("%s: %s (%d errors)", path, state, len(outcome.errors))
        for err in outcome.errors:
            log.info("  - %s", str(err) or repr(err.payload))
        summary.record(str(path), outcome.succeeded, str(outcome.first_error))

    log.info(summary.report())
    return summary.exit_code()


if __name__ == "__main__":
    sys.exit(main())
