# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Vulnerability detectors."""

from .apache_cve_2021_42013 import ApacheHttpServerCVE202142013Detector
from .base import PluginInfo, VulnDetector
from .registry import DETECTOR_CLASSES, build_detectors

__all__ = [
    "ApacheHttpServerCVE202142013Detector",
    "DETECTOR_CLASSES",
    "PluginInfo",
    "VulnDetector",
    "build_detectors",
]
