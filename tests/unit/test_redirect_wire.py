# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from wirechain.http import Request, Response
from wirechain.wire import AutoRedirectingWire, BasicAuthWire, StubWire


def _redirect(status: int, location: str) -> Response:
    return Response(status=status, headers={"Location": location})


def test_follows_relative_location():
    stub = StubWire([_redirect(302, "/next"), Response(status=200, body=b"ok")])
    response = Request(stub, "http://localhost/start").through(AutoRedirectingWire).dispatch()
    assert response.status == 200
    assert [r.uri for r in stub.requests] == ["http://localhost/start", "http://localhost/next"]


def test_see_other_switches_to_get_and_drops_body():
    stub = StubWire([_redirect(303, "http://localhost/done"), Response(status=200)])
    (
        Request(stub, "http://localhost/form")
        .with_method("POST")
        .with_header("Content-Type", "text/plain")
        .with_body("payload")
        .through(AutoRedirectingWire)
        .dispatch()
    )
    second = stub.take(1)
    assert second.method == "GET"
    assert second.body == b""
    assert "Content-Type" not in second.headers


def test_temporary_redirect_preserves_method_and_body():
    stub = StubWire([_redirect(307, "/again"), Response(status=201)])
    Request(stub, "http://localhost/").with_method("PUT").with_body("x").through(AutoRedirectingWire).dispatch()
    second = stub.take(1)
    assert second.method == "PUT"
    assert second.body == b"x"


def test_stops_after_max_hops():
    stub = StubWire([_redirect(301, "/loop")])
    response = Request(stub, "http://localhost/").through(AutoRedirectingWire, max_hops=3).dispatch()
    assert response.status == 301
    assert stub.calls == 4


def test_redirect_without_location_is_returned():
    stub = StubWire([Response(status=302)])
    assert Request(stub, "http://localhost/").through(AutoRedirectingWire).dispatch().status == 302
    assert stub.calls == 1


def test_authorization_not_forwarded_to_other_origin():
    stub = StubWire([_redirect(302, "http://localhost/same"), _redirect(302, "http://elsewhere/"), Response(status=200)])
    (
        Request(stub, "http://localhost/")
        .through(AutoRedirectingWire)
        .through(BasicAuthWire, "u", "p")
        .dispatch()
    )
    assert "Authorization" in stub.take(1).headers
    assert "Authorization" not in stub.take(2).headers
