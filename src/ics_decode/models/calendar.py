"""Decoded VCALENDAR data model."""

from pydantic import BaseModel

from .event import Event


class Calendar(BaseModel):
    """A decoded VCALENDAR block and the events it owns."""

    events: tuple[Event, ...] = ()

    model_config = {"frozen": True}

    def to_json(self, indent: int = 4) -> str:
        """
        Serialize the calendar as an indented JSON document.

        Args:
            indent: Indentation width

        Returns:
            JSON text with ISO-8601 timestamps and null for unset ones
        """
        return self.model_dump_json(indent=indent)
