# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import unittest

from httpdguard.clock import FixedClock
from httpdguard.detectors.apache_cve_2021_42013 import TRAVERSAL_PATH
from httpdguard.http import HttpResponse
from httpdguard.http.adapters import StubHttpClient
from httpdguard.models import NetworkEndpoint, NetworkService, TargetInfo
from httpdguard.runtime import HttpdGuard


class ClosingStubHttpClient(StubHttpClient):
    def __init__(self, responses=None):
        super().__init__(responses)
        self.closed = False

    def close(self) -> None:
        self.closed = True


class TestHttpdGuardRuntime(unittest.TestCase):
    def test_scan_url_reuses_injected_client_and_closes(self):
        responses = {
            "https://victim.example/" + TRAVERSAL_PATH: HttpResponse(
                ok=True,
                status_code=200,
                headers={"Server": "Apache/2.4.50 (Unix)"},
                text="root:x:0:0:root:/root:/bin/bash",
            ),
        }
        client = ClosingStubHttpClient(responses)

        with HttpdGuard(http_client=client, clock=FixedClock.from_epoch_millis(5)) as guard:
            reports = guard.scan_url("https://victim.example")
            self.assertEqual(len(reports), 1)
            self.assertEqual(reports.detection_reports[0].detection_timestamp_ms, 5)
            self.assertEqual(reports.detection_reports[0].network_service.endpoint.hostname, "victim.example")

        self.assertTrue(client.closed)
        self.assertEqual(len(client.requests), 1)

    def test_scan_filters_non_web_services(self):
        client = ClosingStubHttpClient()
        endpoint = NetworkEndpoint(ip="10.1.1.1", port=22)
        ssh = NetworkService(endpoint=endpoint, service_name="ssh")

        with HttpdGuard(http_client=client, clock=FixedClock.from_epoch_millis(0)) as guard:
            reports = guard.scan(TargetInfo(endpoints=(endpoint,)), [ssh])

        self.assertEqual(len(reports), 0)
        self.assertEqual(client.requests, [])


if __name__ == "__main__":
    unittest.main()
