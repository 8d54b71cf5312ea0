# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import unittest

from wirechain.errors import TransportError
from wirechain.http import Headers, Response
from wirechain.wire import StubWire


class TestStubWire(unittest.TestCase):
    def test_records_and_replays(self):
        stub = StubWire().next(Response(status=201)).next(Response(status=204))
        first = stub.send("POST", "http://x/", Headers({"A": "1"}), b"body", timeout=1.0)
        second = stub.send("GET", "http://x/2", Headers(), b"")
        third = stub.send("GET", "http://x/3", Headers(), b"")

        self.assertEqual([first.status, second.status, third.status], [201, 204, 204])
        self.assertEqual(first.uri, "http://x/")
        self.assertEqual(stub.calls, 3)
        self.assertEqual(stub.take().headers.get("a"), "1")
        self.assertEqual(stub.take().text, "body")
        self.assertEqual(stub.take().timeout, 1.0)

    def test_defaults_to_empty_ok(self):
        self.assertEqual(StubWire().send("GET", "http://x/", Headers(), b"").status, 200)

    def test_raises_queued_transport_error(self):
        stub = StubWire([TransportError("down")])
        with self.assertRaisesRegex(TransportError, "down"):
            stub.send("GET", "http://x/", Headers(), b"")
        self.assertEqual(stub.calls, 1)


if __name__ == "__main__":
    unittest.main()
