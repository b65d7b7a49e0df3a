"""Decoded VEVENT data model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ..utils.date_utils import ensure_utc


class Event(BaseModel):
    """A single VEVENT block.

    Built once the matching END:VEVENT line has been read and frozen from then on.
    """

    uid: str = ""

    # Time properties, None when absent from the source
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    # Free text, kept verbatim (no unescaping)
    summary: str = ""
    location: str = ""
    description: str = ""

    model_config = {"frozen": True}

    @field_validator("start", "end")
    @classmethod
    def _normalize_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return ensure_utc(value)

    @property
    def has_start(self) -> bool:
        """Whether DTSTART was present in the source."""
        return self.start is not None
