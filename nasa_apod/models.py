"""
APOD data model.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class APODRecord(BaseModel):
    """One Astronomy Picture of the Day entry, as sent by the API."""

    model_config = ConfigDict(frozen=True, extra="allow")

    date: str
    title: str
    explanation: str
    url: str
    hdurl: Optional[str] = None
    media_type: Optional[str] = None
    copyright: Optional[str] = None
    service_version: Optional[str] = None
    thumbnail_url: Optional[str] = None

    @property
    def image_url(self) -> str:
        """Best available media URL."""
        return self.hdurl or self.url

    @property
    def is_video(self) -> bool:
        return self.media_type == "video"
