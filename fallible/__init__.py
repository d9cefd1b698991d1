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

"""fallible — success/failure outcomes returned as values."""

from fallible.error import Error, as_error, error
from fallible.result import Outcome, ValueOutcome, into_outcome, into_value_outcome

__all__ = [
    "Error",
    "Outcome",
    "ValueOutcome",
    "as_error",
    "error",
    "into_outcome",
    "into_value_outcome",
]
