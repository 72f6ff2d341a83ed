"""Tests for the wire envelopes."""

import unittest
from unittest import mock

from pydantic import ValidationError

from storageengine.models import (
    PublishRequest,
    PublishResponse,
    ReadRequest,
    ReadResponse,
    _env_extra_mode,
)


class ModelsTest(unittest.TestCase):
    def test_read_request_wire_format(self):
        request = ReadRequest(id="wow", password="hello")
        self.assertEqual(request.to_wire(), b'{"id":"wow","pass":"hello"}')

    def test_publish_request_field_order_is_fixed(self):
        request = PublishRequest(note="heyo", password="02_+", id="wow")
        self.assertEqual(
            request.to_wire(), b'{"id":"wow","pass":"02_+","note":"heyo"}'
        )

    def test_publish_request_allows_empty_id(self):
        request = PublishRequest(id="", password="p", note="n")
        self.assertEqual(request.to_wire(), b'{"id":"","pass":"p","note":"n"}')

    def test_read_response_ignores_unknown_fields(self):
        response = ReadResponse.model_validate_json(
            b'{"id":"wow","note":"hi","created":123}'
        )
        self.assertEqual(response.note, "hi")

    def test_publish_response_requires_id(self):
        with self.assertRaises(ValidationError):
            PublishResponse.model_validate_json(b"{}")

    def test_env_extra_mode(self):
        cases = {
            "allow": "allow",
            "FORBID": "forbid",
            "strict": "forbid",
            "off": "ignore",
            "bogus": "ignore",
        }
        for raw, expected in cases.items():
            with mock.patch.dict("os.environ", {"STORAGEENGINE_EXTRA": raw}):
                self.assertEqual(_env_extra_mode(), expected)


if __name__ == "__main__":
    unittest.main()
