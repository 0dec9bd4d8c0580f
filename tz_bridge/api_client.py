"""
HTTP client for a running TZ Bridge service.
"""

from typing import Any, Optional

import requests

from tz_bridge.exceptions import TimezoneLookupError, UnsupportedMethodError
from tz_bridge.models import DEFAULT_CHANNEL_NAME, ChannelResult


class TimezoneClient:
    """Client for asking a TZ Bridge service for the device timezone."""

    def __init__(self, base_url: str, channel_name: str = DEFAULT_CHANNEL_NAME, timeout: float = 5):
        """
        Initialize the client.

        Args:
            base_url: Service root, e.g. http://127.0.0.1:8490
            channel_name: Method channel to call
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.channel_name = channel_name.strip('/')
        self.timeout = timeout

    def _json_or_raise(self, response: requests.Response) -> dict[str, Any]:
        """Decode a JSON body, falling back to the HTTP status when there is none."""
        try:
            data = response.json()
        except ValueError:
            response.raise_for_status()
            raise
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response body: {data!r}")
        return data

    def get_timezone(self) -> str:
        """
        Get the service host's timezone identifier.

        Returns:
            IANA identifier, e.g. 'Europe/Moscow'

        Raises:
            TimezoneLookupError: If the service could not resolve the timezone
            requests.RequestException: If the request fails
        """
        response = requests.get(f"{self.base_url}/timezone", timeout=self.timeout)
        data = self._json_or_raise(response)
        # Only a 500 carries a lookup failure; other error bodies are HTTP problems
        if response.status_code == 500 and 'error' in data:
            raise TimezoneLookupError(data['error'])
        response.raise_for_status()
        return data['timezone']

    def invoke(self, method: str, arguments: Optional[dict] = None) -> ChannelResult:
        """
        Invoke a method on the service's channel.

        Args:
            method: Method name, e.g. 'getTimeZone'
            arguments: Optional call arguments

        Returns:
            The channel result as reported by the service
        """
        response = requests.post(
            f"{self.base_url}/channel/{self.channel_name}",
            json={'method': method, 'arguments': arguments},
            timeout=self.timeout,
        )
        data = self._json_or_raise(response)
        if 'status' not in data:
            response.raise_for_status()
            raise ValueError(f"Unexpected response body: {data!r}")
        return ChannelResult.from_dict(data)

    @staticmethod
    def raise_for_result(result: ChannelResult, method: str = 'getTimeZone') -> Optional[str]:
        """Return the success value, or raise the exception matching the result."""
        if result.is_not_implemented:
            raise UnsupportedMethodError(method)
        if result.is_error:
            raise TimezoneLookupError(result.message)
        return result.value
