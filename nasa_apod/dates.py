"""
Date helpers for building APOD queries and displaying APOD dates.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from babel.dates import format_date as babel_format_date

DEFAULT_LOCALE = "es_ES"


def format_date(value: datetime) -> str:
    """
    Return the UTC calendar day of ``value`` as ``YYYY-MM-DD``.

    Naive datetimes are taken as local time.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    return value.astimezone(timezone.utc).date().isoformat()


def get_days_ago(days: int, now: Optional[datetime] = None) -> str:
    """Return the day ``days`` calendar days before ``now`` (default: current local time)."""
    if now is None:
        now = datetime.now()
    return format_date(now - timedelta(days=days))


def format_date_locale(date_string: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Render an ISO date as a long human-readable string, e.g. ``viernes, 15 de marzo de 2024``.

    Only meant for display; a malformed string raises ``ValueError``.
    """
    day = datetime.fromisoformat(date_string).date()
    return babel_format_date(day, format="full", locale=locale)
