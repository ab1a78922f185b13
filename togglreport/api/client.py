"""
TogglClient: A client for the Toggl Track reports and workspace APIs.
"""
import logging
from typing import Any, List, Optional

import requests
from requests.auth import HTTPBasicAuth

from ..config import Config
from ..errors import DecodeError, HTTPStatusError, TransportError
from ..reports.models import SearchCriteria, Tag, TimeEntryGroup, decode_list

logger = logging.getLogger(__name__)

API_TOKEN_PASSWORD = "api_token"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class TogglClient:
    """A client for reading time entries and tags of one Toggl workspace."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """Initialize the TogglClient.

        Args:
            config: Credentials, workspace ID and base URL
            session: requests session to use (optional, a new one is created)
        """
        self.config = config
        self.workspace_id = config.workspace_id
        self.base_url = config.base_url.rstrip("/")
        self.session = session or requests.Session()
        # Applied to every request regardless of method
        self.session.auth = HTTPBasicAuth(config.api_key, API_TOKEN_PASSWORD)
        self.session.headers.update({"Content-Type": JSON_CONTENT_TYPE})

    def api_request(self, method: str, url: str, json: Optional[dict] = None) -> Any:
        """Make a request to the Toggl API and decode the JSON body.

        Args:
            method: HTTP method
            url: API endpoint URL
            json: JSON request body (optional)

        Returns:
            Decoded JSON response

        Raises:
            TransportError: If the request could not be completed
            HTTPStatusError: If the API answers with a non-success status
            DecodeError: If the body is not valid JSON
        """
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, json=json)
        except requests.RequestException as e:
            raise TransportError(f"Error while sending request to {url}: {e}") from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise HTTPStatusError(
                f"API request failed with status {resp.status_code}: {url}",
                status_code=resp.status_code,
            ) from e

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"JSON unmarshaling failed for {url}: {e}") from e

    def search_time_entries(self, criteria: SearchCriteria) -> List[TimeEntryGroup]:
        """Search time entries of the workspace.

        Args:
            criteria: Search request body

        Returns:
            List of time entry groups
        """
        url = f"{self.base_url}/reports/api/v3/workspace/{self.workspace_id}/search/time_entries"
        data = self.api_request("POST", url, json=criteria.to_payload())
        return decode_list(data, TimeEntryGroup.from_dict)

    def list_tags(self) -> List[Tag]:
        """Get all tags in the workspace.

        Returns:
            List of tags
        """
        url = f"{self.base_url}/api/v9/workspaces/{self.workspace_id}/tags"
        data = self.api_request("GET", url)
        return decode_list(data, Tag.from_dict)
