"""
NASA Astronomy Picture of the Day client.

Fetch single days, date ranges and recent entries from the APOD API, plus
helpers to build and display the dates the API works with.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

from nasa_apod.client import APODClient, APODError, MalformedResponseError, NASAAPIError
from nasa_apod.config import Config
from nasa_apod.models import APODRecord

__version__ = "0.1.0"
__author__ = "Meir Miyara"
__email__ = "meir.miyara@gmail.com"

__all__ = [
    "APODClient",
    "APODError",
    "APODRecord",
    "Config",
    "MalformedResponseError",
    "NASAAPIError",
]
