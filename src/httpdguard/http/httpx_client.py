# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlsplit, urlunsplit

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def split_raw_target(url: str) -> tuple[str, bytes]:
    """
    Split `url` into an origin URL and the literal request target.

    httpx normalizes the path of any URL it parses (percent sequences are
    re-quoted), so requests that must reach the server verbatim carry the
    target separately through httpcore's ``target`` request extension.
    """
    parts = urlsplit(url)
    origin = urlunsplit((parts.scheme, parts.netloc, "/", "", ""))
    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"
    return origin, target.encode("ascii")


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = HttpSettings.max_body_bytes
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            url = request.url
            extensions: dict[str, Any] = {}
            if request.path_as_is:
                url, extensions["target"] = split_raw_target(request.url)

            with self._client.stream(
                request.method,
                url,
                headers=headers,
                content=request.body,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
                extensions=extensions,
            ) as resp:
                content = bytearray()
                truncated = False
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if remaining <= 0:
                        truncated = True
                        break
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        truncated = True
                        break
                    content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=dict(resp.headers),
                text=text,
                content=bytes(content),
                url=request.url if request.path_as_is else str(resp.url),
                meta={
                    "body_truncated": truncated,
                    "body_bytes_read": len(content),
                    "body_bytes_limit": max_body_bytes,
                },
            )
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed: %s (%s)", request.method, request.url, exc, category.value)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_category=category.value,
                error_message=str(exc),
                error_type=type(exc).__name__,
            )

    def close(self) -> None:
        self._client.close()


__all__ = ["HttpxClient", "split_raw_target"]
