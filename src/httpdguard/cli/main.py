# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HttpdGuard CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import DetectionReportList
from ..runtime import HttpdGuard
from ..scan import build_scan_summary
from ..utils.network_service import network_service_from_url

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_VULNERABLE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="HttpdGuard CVE-2021-42013 scanner (Apache HTTP Server 2.4.49/2.4.50 path traversal)"
    )
    parser.add_argument("urls", nargs="+", metavar="url", help="Web service URL(s) to probe")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--log-level", default=None, help="Logging level (default: HTTPDGUARD_LOG_LEVEL or WARNING)")
    return parser


def _print_json(data: dict[str, Any]) -> None:
    json.dump(data, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(url: str, reports: DetectionReportList) -> None:
    if not len(reports):
        print(f"[HttpdGuard] {url}: not vulnerable")
        return
    for report in reports:
        vuln = report.vulnerability
        print(f"[HttpdGuard] {url}: VULNERABLE")
        print(f"  {vuln.main_id.value} ({vuln.severity.value}): {vuln.title}")
        print(f"  Recommendation: {vuln.recommendation}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    targets = []
    for url in args.urls:
        try:
            targets.append((url, *network_service_from_url(url)))
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_USAGE

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None:
        settings.timeout = args.timeout

    http_client = create_default_http_client(settings)

    results: dict[str, DetectionReportList] = {}
    with HttpdGuard(http_client=http_client) as guard:
        for url, target_info, service in targets:
            logger.info("Scanning %s", url)
            results[url] = guard.scan(target_info, [service])

    if args.json:
        _print_json({url: build_scan_summary(reports) for url, reports in results.items()})
    else:
        for url, reports in results.items():
            _pretty_print(url, reports)

    if any(len(reports) for reports in results.values()):
        return EXIT_VULNERABLE
    return EXIT_CLEAN


if __name__ == "__main__":
    raise SystemExit(main())
