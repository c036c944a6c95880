# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan orchestration exports."""

from .report import build_scan_summary
from .runner import ScanRunner

__all__ = ["ScanRunner", "build_scan_summary"]
