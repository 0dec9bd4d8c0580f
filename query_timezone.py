#!/usr/bin/env python3
"""
TZ Bridge - Timezone Query Script

This script:
1. Loads bridge settings from config.ini (or TZ_BRIDGE_* variables)
2. Resolves the timezone locally, or asks a running service when
   TZ_BRIDGE_URL is set
3. Prints the identifier and the current local time in that zone
"""

import os
import sys
from datetime import datetime
from zoneinfo import ZoneInfo

from tz_bridge import TimezoneClient, TimezoneLookupError
from tz_bridge.config_loader import load_config
from tz_bridge.timezone_utils import get_system_timezone


def main() -> int:
    """Print the device timezone; return a process exit code."""
    try:
        settings = load_config()
    except ValueError as e:
        print(f"\n❌ Configuration Error:\n{e}\n")
        return 2

    service_url = os.getenv('TZ_BRIDGE_URL')
    try:
        if service_url:
            print(f"Asking {service_url} on channel {settings.channel_name}...")
            client = TimezoneClient(service_url, channel_name=settings.channel_name)
            timezone_id = client.get_timezone()
        else:
            print(f"Resolving locally ({', '.join(settings.strategies)})...")
            timezone_id = get_system_timezone(settings.strategies)
    except TimezoneLookupError as e:
        print(f"\n❌ Timezone lookup failed: {e}\n")
        return 1

    now = datetime.now(ZoneInfo(timezone_id))
    print(f"✓ Timezone: {timezone_id}")
    print(f"✓ Local time: {now.strftime('%Y-%m-%d %H:%M:%S %Z')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
