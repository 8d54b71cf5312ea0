# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import time

import pytest

from wirechain.config import HttpSettings
from wirechain.errors import ErrorCategory, TransportError
from wirechain.http import Request, Response
from wirechain.wire import RetryConfig, RetryWire, StubWire


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    sleeps = []
    monkeypatch.setattr(time, "sleep", sleeps.append)
    return sleeps


class AlwaysFailingWire:
    def __init__(self):
        self.calls = 0

    def send(self, method, uri, headers, body, *, timeout=None):  # noqa: ARG002
        self.calls += 1
        raise TransportError(f"refused #{self.calls}", category=ErrorCategory.CONNECTION_ERROR, uri=uri)


@pytest.mark.parametrize("attempts", [1, 2, 5])
def test_gives_up_after_configured_attempts(attempts):
    wire = AlwaysFailingWire()
    request = Request(wire, "http://localhost/").through(RetryWire, RetryConfig(max_attempts=attempts))
    with pytest.raises(TransportError, match=f"refused #{attempts}") as excinfo:
        request.dispatch()
    assert wire.calls == attempts
    assert excinfo.value.category is ErrorCategory.CONNECTION_ERROR


def test_succeeds_after_transient_failures(no_sleep):
    stub = StubWire([TransportError("reset"), Response(status=503), Response(status=200, body=b"done")])
    request = Request(stub, "http://localhost/").through(
        RetryWire, RetryConfig(max_attempts=3, initial_delay=0.5, backoff_factor=2.0)
    )
    response = request.dispatch()
    assert response.status == 200
    assert response.text == "done"
    assert stub.calls == 3
    assert no_sleep == [0.5, 1.0]


def test_resends_request_verbatim():
    stub = StubWire([TransportError("reset"), Response(status=200)])
    Request(stub, "http://localhost/x").with_method("POST").with_body("p").through(RetryWire, max_attempts=2).dispatch()
    assert stub.take(0) == stub.take(1)


def test_returns_last_server_error_when_exhausted():
    stub = StubWire([Response(status=500), Response(status=502)])
    response = Request(stub, "http://localhost/").through(RetryWire, max_attempts=2).dispatch()
    assert response.status == 502
    assert stub.calls == 2


def test_client_errors_are_not_retried():
    stub = StubWire([Response(status=404), Response(status=200)])
    response = Request(stub, "http://localhost/").through(RetryWire, max_attempts=3).dispatch()
    assert response.status == 404
    assert stub.calls == 1


def test_custom_statuses_and_transport_errors_switch():
    stub = StubWire([Response(status=429), Response(status=200)])
    response = Request(stub, "http://localhost/").through(RetryWire, retry_statuses=frozenset({429})).dispatch()
    assert response.status == 200

    failing = AlwaysFailingWire()
    request = Request(failing, "http://localhost/").through(RetryWire, max_attempts=4, retry_transport_errors=False)
    with pytest.raises(TransportError):
        request.dispatch()
    assert failing.calls == 1


def test_retry_config_from_settings_clamps_minimum():
    settings = HttpSettings(max_retries=0)
    retry = RetryConfig.from_settings(settings)
    assert retry.max_attempts == 1
    assert retry.backoff_factor == settings.backoff_factor
    assert RetryWire(StubWire(), RetryConfig(max_attempts=0)).config.max_attempts == 1
