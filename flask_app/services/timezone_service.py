"""
Service layer between the HTTP routes and the timezone channel.
"""
from typing import Any, Optional

from flask import current_app

from tz_bridge.channel import MethodChannel
from tz_bridge.exceptions import TimezoneLookupError
from tz_bridge.models import BridgeSettings, ChannelResult
from tz_bridge.timezone_utils import TimezoneResolver


class TimezoneService:
    """Service answering timezone requests for the web layer."""

    def __init__(self, settings: Optional[BridgeSettings] = None):
        if settings is None:
            settings = current_app.config.get('BRIDGE_SETTINGS') or BridgeSettings()
        self.settings = settings
        self.channel = MethodChannel(settings.channel_name, TimezoneResolver(settings.strategies))

    def get_timezone(self) -> str:
        """
        Resolve the current timezone.

        Raises:
            TimezoneLookupError: If the lookup fails
        """
        try:
            return self.channel.resolver.resolve()
        except TimezoneLookupError as e:
            print(f"Timezone lookup error: {e}")
            raise

    def has_channel(self, channel_name: str) -> bool:
        return channel_name.strip('/') == self.channel.name.strip('/')

    def invoke(self, method: Any, arguments: Optional[dict] = None) -> ChannelResult:
        """Dispatch one channel call and report lookup failures."""
        result = self.channel.dispatch(method, arguments)
        if result.is_error:
            print(f"Timezone lookup error: {result.message}")
        return result
