# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Detector registry."""

from __future__ import annotations

from ..clock import Clock
from ..http import HttpClient
from .apache_cve_2021_42013 import ApacheHttpServerCVE202142013Detector
from .base import VulnDetector

DETECTOR_CLASSES: list[type[VulnDetector]] = [
    ApacheHttpServerCVE202142013Detector,
]


def build_detectors(
    http_client: HttpClient,
    clock: Clock,
    names: list[str] | None = None,
) -> list[VulnDetector]:
    """Instantiate registered detectors, optionally restricted to `names`."""
    selected = DETECTOR_CLASSES
    if names is not None:
        known = {cls.plugin_info.name: cls for cls in DETECTOR_CLASSES}
        unknown = [name for name in names if name not in known]
        if unknown:
            raise ValueError(f"Unknown detector(s): {', '.join(unknown)}")
        selected = [known[name] for name in names]
    return [cls(http_client, clock) for cls in selected]


__all__ = ["DETECTOR_CLASSES", "build_detectors"]
