# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx

from httpdguard import config
from httpdguard.config import DEFAULT_USER_AGENT
from httpdguard.errors import ErrorCategory, categorize_exception, error_category_to_reason
from httpdguard.log import setup_logging


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HTTPDGUARD_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("HTTPDGUARD_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("HTTPDGUARD_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("HTTPDGUARD_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("HTTPDGUARD_HTTP_MAX_BODY_BYTES", "4096")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.max_body_bytes == 4096


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("HTTPDGUARD_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("HTTPDGUARD_HTTP_MAX_BODY_BYTES", "-5")

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.max_body_bytes == config.DEFAULT_MAX_BODY_BYTES
    assert DEFAULT_USER_AGENT in settings.user_agent


def test_http_settings_redirects_truthy_variants(monkeypatch):
    for value in ("1", "on", "YES", " true "):
        monkeypatch.setenv("HTTPDGUARD_HTTP_REDIRECTS", value)
        assert config.load_http_settings().allow_redirects is True


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("HTTPDGUARD_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("HTTPDGUARD_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_categorize_exception_httpx_types():
    assert categorize_exception(httpx.ConnectTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ReadTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.RemoteProtocolError("garbage")) == ErrorCategory.CONNECTION_ERROR


def test_categorize_exception_plain_types():
    assert categorize_exception(ConnectionRefusedError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(socket.gaierror(-2, "Name or service not known")) == ErrorCategory.DNS_ERROR
    assert categorize_exception(ssl.SSLError("handshake")) == ErrorCategory.SSL_ERROR
    assert categorize_exception(ValueError("odd")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause_chain():
    try:
        try:
            raise ssl.SSLCertVerificationError("certificate verify failed")
        except ssl.SSLError as inner:
            raise httpx.ConnectError("wrapped") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) == ErrorCategory.SSL_ERROR

    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except OSError as inner:
            raise httpx.ConnectError("wrapped") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) == ErrorCategory.DNS_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Network timeout during probe"
    assert error_category_to_reason("DNS_ERROR") == "DNS resolution failure"
    assert error_category_to_reason(None) == ""
    assert error_category_to_reason("SOMETHING_NEW") == "Probe failed due to network error"


def test_setup_logging_accepts_unknown_level(monkeypatch):
    calls = {}

    def fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    setup_logging("not-a-level")
    assert calls["level"] == logging.WARNING

    monkeypatch.setenv("HTTPDGUARD_LOG_LEVEL", "debug")
    setup_logging()
    assert calls["level"] == logging.DEBUG
