"""Calendar data models."""

from .calendar import Calendar
from .event import Event

__all__ = ["Calendar", "Event"]
