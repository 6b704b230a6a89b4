"""Templated flight-status announcements."""

from fsops.announcements.models import STATUS_LABELS, AnnouncementStatus, FlightAnnouncement
from fsops.announcements.schedule import format_airline_date, parse_schedule_time
from fsops.announcements.templates import AnnouncementRenderer

__all__ = [
    "AnnouncementRenderer",
    "AnnouncementStatus",
    "FlightAnnouncement",
    "STATUS_LABELS",
    "format_airline_date",
    "parse_schedule_time",
]
