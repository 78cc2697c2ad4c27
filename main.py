#!/usr/bin/env python3
"""
Print Astronomy Picture of the Day entries.

Usage:
    main.py                      today's picture
    main.py 2024-03-15           a given day
    main.py 2024-01-01 2024-01-03  a range of days
    main.py --recent [N]         N pictures (default 12)

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add the package to the Python path
sys.path.insert(0, str(Path(__file__).parent))

from nasa_apod.client import APODClient
from nasa_apod.config import Config
from nasa_apod.dates import format_date_locale

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)8s | %(name)s | %(message)s"
)
logging.getLogger("aiohttp").setLevel(logging.WARNING)

_LOG = logging.getLogger(__name__)


def print_record(record, locale: str) -> None:
    """Print one record."""
    print(f"{format_date_locale(record.date, locale)} - {record.title}")
    if record.copyright:
        print(f"  (c) {record.copyright.strip()}")
    print(f"  {record.media_type or 'media'}: {record.image_url}")


def check_args(argv: list[str]) -> None:
    """Exit with the usage text on unexpected arguments."""
    if len(argv) > 2:
        raise SystemExit(__doc__.split(":copyright:")[0].strip())


async def main(argv: list[str]) -> None:
    """Main entry point."""
    config = Config.from_env()

    async with APODClient(config) as client:
        if argv and argv[0] == "--recent":
            count = int(argv[1]) if len(argv) > 1 else 12
            records = await client.get_recent_apods(count)
        elif len(argv) == 2:
            records = await client.get_apod_range(argv[0], argv[1])
        else:
            records = [await client.get_apod(argv[0] if argv else None)]

    for record in records:
        print_record(record, config.locale)


if __name__ == "__main__":
    check_args(sys.argv[1:])

    try:
        asyncio.run(main(sys.argv[1:]))
    except KeyboardInterrupt:
        print("Stopped by user")
    except Exception as e:
        _LOG.error(f"Request failed: {e}")
        sys.exit(1)
