"""
TZ Bridge

Answers the 'getTimeZone' method-channel call with the device's IANA
timezone identifier.
"""

from tz_bridge.api_client import TimezoneClient
from tz_bridge.channel import MethodChannel
from tz_bridge.exceptions import StrategyUnavailable, TimezoneLookupError, UnsupportedMethodError
from tz_bridge.models import BridgeSettings, ChannelMethod, ChannelResult, MethodCall
from tz_bridge.timezone_utils import TimezoneResolver, get_system_timezone

__version__ = "0.1.0"
__all__ = [
    "TimezoneClient",
    "MethodChannel",
    "TimezoneResolver",
    "get_system_timezone",
    "BridgeSettings",
    "ChannelMethod",
    "ChannelResult",
    "MethodCall",
    "TimezoneLookupError",
    "StrategyUnavailable",
    "UnsupportedMethodError",
]
