"""
Method channel answering timezone calls from another runtime.
"""

from typing import Any, Optional

from tz_bridge.models import DEFAULT_CHANNEL_NAME, ChannelMethod, ChannelResult, MethodCall
from tz_bridge.timezone_utils import TimezoneResolver


class MethodChannel:
    """Named channel that dispatches calls to the timezone resolver."""

    def __init__(self, name: str = DEFAULT_CHANNEL_NAME, resolver: Optional[TimezoneResolver] = None):
        self.name = name
        self.resolver = resolver or TimezoneResolver()

    def dispatch(self, method_name: Any, arguments: Optional[dict] = None) -> ChannelResult:
        """
        Answer one call by name.

        Args:
            method_name: Name of the invoked method, e.g. 'getTimeZone'
            arguments: Call arguments (unused by getTimeZone)

        Returns:
            Success with the timezone identifier, an error result, or not-implemented
        """
        method = ChannelMethod.parse(method_name)
        if method is ChannelMethod.GET_TIME_ZONE:
            return self.resolver.resolve_result()
        return ChannelResult.not_implemented()

    def handle(self, call: MethodCall) -> ChannelResult:
        return self.dispatch(call.method, call.arguments)

    def __repr__(self) -> str:
        return f"MethodChannel(name='{self.name}', strategies={list(self.resolver.strategy_names)})"
