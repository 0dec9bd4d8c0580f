"""
Timezone resolution for the host device.

The lookup tries an ordered list of strategies, most precise first. Each
strategy returns a raw zone name or raises StrategyUnavailable; the first
name found is canonicalised and validated before it is returned.
"""

import os
from pathlib import Path
from typing import Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from tz_bridge.exceptions import StrategyUnavailable, TimezoneLookupError
from tz_bridge.models import DEFAULT_STRATEGIES, ChannelResult, is_iana_zone_name

ETC_TIMEZONE = Path('/etc/timezone')
ETC_LOCALTIME = Path('/etc/localtime')

CANONICAL_UTC = 'UTC'
UTC_ALIASES = frozenset({
    'UTC',
    'Etc/UTC',
    'Etc/Universal',
    'Universal',
    'Etc/Zulu',
    'Zulu',
    'UCT',
    'Etc/UCT',
})


def _zone_from_path(path: str) -> Optional[str]:
    """Extract 'Area/Location' from a path such as /usr/share/zoneinfo/Area/Location."""
    parts = path.split('/')
    if 'zoneinfo' in parts:
        idx = parts.index('zoneinfo')
        name = '/'.join(parts[idx + 1:])
        return name or None
    return None


def from_tzlocal() -> str:
    """Ask tzlocal to re-read the system configuration and name the zone."""
    tzlocal.reload_localzone()
    name = tzlocal.get_localzone_name()
    if not name:
        raise StrategyUnavailable('tzlocal found no named timezone')
    return name


def from_environment() -> str:
    """
    Read the configured zone the way the host does: TZ env, /etc/timezone,
    then the /etc/localtime symlink.
    """
    tz_env = os.environ.get('TZ', '').strip()
    if tz_env:
        # POSIX allows a leading ':' before a zone name or file path
        tz_env = tz_env.lstrip(':')
        if tz_env.startswith('/'):
            # A link such as /etc/localtime names its zone through its target
            name = _zone_from_path(tz_env) or _zone_from_path(os.path.realpath(tz_env))
            if name:
                return name
            raise TimezoneLookupError(f"TZ file '{tz_env}' is not inside a zoneinfo database")
        return tz_env

    try:
        content = ETC_TIMEZONE.read_text().strip()
        if content:
            return content
    except FileNotFoundError:
        pass

    if ETC_LOCALTIME.is_symlink():
        name = _zone_from_path(os.readlink(ETC_LOCALTIME))
        if name:
            return name

    raise StrategyUnavailable('No TZ variable, /etc/timezone or /etc/localtime link')


def error_message(error: Exception) -> str:
    """Readable message for an exception; KeyError subclasses quote their str()."""
    if error.args and isinstance(error.args[0], str) and error.args[0]:
        return error.args[0]
    return str(error) or error.__class__.__name__


STRATEGIES = {
    'tzlocal': from_tzlocal,
    'environment': from_environment,
}


def canonicalize(name: str) -> str:
    """Normalise a raw zone name; every UTC alias becomes 'UTC'."""
    name = name.strip()
    if name in UTC_ALIASES:
        return CANONICAL_UTC
    return name


def validate_zone_name(name: str) -> str:
    """Return the name if zoneinfo can load it, else raise TimezoneLookupError."""
    if not name:
        raise TimezoneLookupError('Empty timezone identifier')
    if not is_iana_zone_name(name):
        raise TimezoneLookupError(f"Unknown timezone identifier '{name}'")
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneLookupError(f"Unknown timezone identifier '{name}'") from e
    return name


class TimezoneResolver:
    """Resolve the host's configured timezone to its IANA identifier."""

    def __init__(self, strategies: Optional[Sequence[str]] = None):
        """
        Initialize the resolver.

        Args:
            strategies: Strategy names in preference order (default: tzlocal, environment)

        Raises:
            ValueError: If a strategy name is not known
        """
        names = tuple(strategies) if strategies else DEFAULT_STRATEGIES
        unknown = [name for name in names if name not in STRATEGIES]
        if unknown:
            raise ValueError(
                f"Unknown timezone strategies: {', '.join(unknown)}. "
                f"Choose from: {', '.join(STRATEGIES)}"
            )
        self.strategy_names = names

    def resolve(self) -> str:
        """
        Resolve the current system timezone.

        Returns:
            Canonical IANA identifier, e.g. 'Europe/Moscow' or 'UTC'

        Raises:
            TimezoneLookupError: If no strategy yields a valid zone or a strategy fails
        """
        for name in self.strategy_names:
            strategy = STRATEGIES[name]
            try:
                raw = strategy()
            except StrategyUnavailable:
                continue
            except TimezoneLookupError:
                raise
            except Exception as e:
                raise TimezoneLookupError(error_message(e)) from e
            return validate_zone_name(canonicalize(raw))

        raise TimezoneLookupError('Unable to determine system timezone')

    def resolve_result(self) -> ChannelResult:
        """Resolve and wrap the outcome as a channel result instead of raising."""
        try:
            return ChannelResult.success(self.resolve())
        except Exception as e:
            return ChannelResult.error(error_message(e))


def get_system_timezone(strategies: Optional[Sequence[str]] = None) -> str:
    """Return the canonical identifier of the system timezone."""
    return TimezoneResolver(strategies).resolve()

