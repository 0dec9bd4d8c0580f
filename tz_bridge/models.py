"""
Data models for the timezone bridge.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

DEFAULT_CHANNEL_NAME = 'schelper/timezone'
DEFAULT_STRATEGIES = ('tzlocal', 'environment')

# Area/Location[/Sublocation] or a single-word constant such as UTC, GMT, EST5EDT
IANA_ZONE_PATTERN = re.compile(r'^(?:[A-Za-z][A-Za-z0-9_+\-]*)(?:/[A-Za-z0-9_+\-]+)*$')

STATUS_SUCCESS = 'success'
STATUS_ERROR = 'error'
STATUS_NOT_IMPLEMENTED = 'not_implemented'

ERROR_CODE = 'error'


def is_iana_zone_name(value: Any) -> bool:
    """Check whether a value looks like an IANA zone identifier."""
    return isinstance(value, str) and bool(IANA_ZONE_PATTERN.match(value))


class ChannelMethod(str, Enum):
    """Calls the timezone channel understands."""

    GET_TIME_ZONE = 'getTimeZone'

    @classmethod
    def parse(cls, name: Any) -> Optional['ChannelMethod']:
        """Return the matching method, or None for anything unsupported."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass
class MethodCall:
    """A single call arriving over the method channel."""

    method: str
    arguments: Optional[dict] = None


@dataclass
class ChannelResult:
    """
    Outcome of one channel call.

    Exactly one of three shapes: a success carrying the value, an error
    carrying code/message/details, or a bare not-implemented marker.
    """

    status: str
    value: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None
    details: Any = None

    @classmethod
    def success(cls, value: str) -> 'ChannelResult':
        return cls(status=STATUS_SUCCESS, value=value)

    @classmethod
    def error(cls, message: Optional[str], code: str = ERROR_CODE, details: Any = None) -> 'ChannelResult':
        return cls(status=STATUS_ERROR, code=code, message=message, details=details)

    @classmethod
    def not_implemented(cls) -> 'ChannelResult':
        return cls(status=STATUS_NOT_IMPLEMENTED)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ChannelResult':
        """Rebuild a result from its wire envelope."""
        status = data.get('status')
        if status == STATUS_SUCCESS:
            return cls.success(data.get('result'))
        if status == STATUS_ERROR:
            return cls.error(
                data.get('message'),
                code=data.get('code') or ERROR_CODE,
                details=data.get('details'),
            )
        if status == STATUS_NOT_IMPLEMENTED:
            return cls.not_implemented()
        raise ValueError(f"Unknown channel result status: {status!r}")

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == STATUS_ERROR

    @property
    def is_not_implemented(self) -> bool:
        return self.status == STATUS_NOT_IMPLEMENTED

    def to_dict(self) -> dict[str, Any]:
        """Render the wire envelope for this result."""
        if self.is_success:
            return {'status': self.status, 'result': self.value}
        if self.is_error:
            return {
                'status': self.status,
                'code': self.code,
                'message': self.message,
                'details': self.details,
            }
        return {'status': self.status}


@dataclass
class BridgeSettings:
    """Runtime settings for the bridge and its HTTP service."""

    channel_name: str = DEFAULT_CHANNEL_NAME
    strategies: tuple[str, ...] = DEFAULT_STRATEGIES
    host: str = '0.0.0.0'
    port: int = 8490
