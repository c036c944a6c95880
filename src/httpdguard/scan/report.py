# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reporting helpers for scan orchestration."""

from __future__ import annotations

from typing import Any

from ..models import DetectionReportList


def build_scan_summary(reports: DetectionReportList) -> dict[str, Any]:
    """Flatten a report list into a JSON-ready summary mapping."""
    findings = [report.to_dict() for report in reports]
    return {
        "vulnerable": bool(findings),
        "finding_count": len(findings),
        "findings": findings,
    }


__all__ = ["build_scan_summary"]
