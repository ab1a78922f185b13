import sys
import os
import json
import base64
import unittest
from unittest.mock import patch

import requests

# Add the parent directory to sys.path to import the togglreport package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from togglreport.api.client import TogglClient
from togglreport.config import Config
from togglreport.errors import DecodeError, HTTPStatusError, TransportError
from togglreport.reports.models import SearchCriteria, Tag, TimeEntryGroup


def make_response(status_code: int = 200, body=None, raw: bytes = None) -> requests.Response:
    """Build a requests.Response with the given status and JSON body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = "https://api.track.toggl.com/test"
    return resp


class TestTogglClient(unittest.TestCase):
    """Test the Toggl API client against mocked HTTP responses."""

    def setUp(self):
        """Set up a client for a test workspace."""
        self.config = Config(api_key="test_api_key", workspace_id="123")
        self.client = TogglClient(self.config)

    def test_every_request_is_authenticated(self):
        """Basic auth and the JSON content type apply to GET and POST alike."""
        expected = "Basic " + base64.b64encode(b"test_api_key:api_token").decode("ascii")
        for method in ("GET", "POST"):
            with self.subTest(method=method):
                prepared = self.client.session.prepare_request(
                    requests.Request(method, "https://api.track.toggl.com/api/v9/me"))
                self.assertEqual(prepared.headers["Authorization"], expected)
                self.assertEqual(prepared.headers["Content-Type"], "application/json; charset=utf-8")

    @patch('requests.Session.request')
    def test_search_time_entries(self, mock_request):
        mock_request.return_value = make_response(body=[
            {"tag_ids": [1, 2], "time_entries": [{"start": "2025-06-02T10:00:00+09:00", "seconds": 3600}]},
            {"tag_ids": None, "time_entries": []},
        ])

        groups = self.client.search_time_entries(SearchCriteria.for_month(2025, 6))

        self.assertEqual(groups, [
            TimeEntryGroup(tag_ids=(1, 2), time_entries=(("2025-06-02T10:00:00+09:00", 3600),)),
            TimeEntryGroup(tag_ids=(), time_entries=()),
        ])
        mock_request.assert_called_once_with(
            "POST",
            "https://api.track.toggl.com/reports/api/v3/workspace/123/search/time_entries",
            json={"start_date": "2025-06-01", "end_date": "2025-06-30", "page_size": 3000},
        )

    @patch('requests.Session.request')
    def test_list_tags(self, mock_request):
        mock_request.return_value = make_response(body=[{"id": 1, "name": "Dev"}, {"id": 2, "name": "Ops"}])

        tags = self.client.list_tags()

        self.assertEqual(tags, [Tag(1, "Dev"), Tag(2, "Ops")])
        mock_request.assert_called_once_with(
            "GET", "https://api.track.toggl.com/api/v9/workspaces/123/tags", json=None)

    @patch('requests.Session.request')
    def test_null_tag_list(self, mock_request):
        mock_request.return_value = make_response(body=None)
        self.assertEqual(self.client.list_tags(), [])

    @patch('requests.Session.request')
    def test_transport_error(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("connection refused")
        with self.assertRaises(TransportError):
            self.client.list_tags()

    @patch('requests.Session.request')
    def test_http_status_error(self, mock_request):
        for status in (401, 403, 429, 500):
            with self.subTest(status=status):
                mock_request.return_value = make_response(status_code=status, body={"error": "nope"})
                with self.assertRaises(HTTPStatusError) as ctx:
                    self.client.search_time_entries(SearchCriteria.for_month(2025, 6))
                self.assertEqual(ctx.exception.status_code, status)

    @patch('requests.Session.request')
    def test_invalid_json(self, mock_request):
        mock_request.return_value = make_response(raw=b"<html>not json</html>")
        with self.assertRaises(DecodeError):
            self.client.list_tags()

    @patch('requests.Session.request')
    def test_unexpected_json_shape(self, mock_request):
        mock_request.return_value = make_response(body={"time_entries": []})
        with self.assertRaises(DecodeError):
            self.client.search_time_entries(SearchCriteria.for_month(2025, 6))


if __name__ == '__main__':
    unittest.main()
