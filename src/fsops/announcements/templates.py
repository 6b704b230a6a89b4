"""Flight announcement rendering.

Templates are defined in templates.yaml next to this module and loaded
once. Rendering builds a context from a FlightAnnouncement and formats
the shared header and crew blocks before the status template.

Typical usage:
    from fsops.announcements import AnnouncementRenderer

    renderer = AnnouncementRenderer()
    text = renderer.render(announcement, settings)
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from fsops.announcements.models import AnnouncementStatus, FlightAnnouncement
from fsops.announcements.schedule import (
    checkin_opens,
    format_airline_date,
    gate_opens,
    unix_timestamp,
)
from fsops.core.logging_system import get_logger
from fsops.settings import BotSettings

logger = get_logger(__name__)

DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates.yaml"

NOT_AVAILABLE = "N/A"


def _mention_user(user_id: str | None) -> str:
    return f"<@{user_id}>" if user_id else NOT_AVAILABLE


def _mention_channel(channel_id: str | None) -> str:
    return f"<#{channel_id}>" if channel_id else NOT_AVAILABLE


class AnnouncementRenderer:
    """Render flight announcements from YAML templates.

    Examples:
        >>> renderer = AnnouncementRenderer()
        >>> print(renderer.render(announcement, BotSettings()))
    """

    def __init__(self, templates_path: str | Path | None = None) -> None:
        """Initialize renderer.

        Args:
            templates_path: YAML template file. Defaults to the packaged
                templates.yaml.

        Raises:
            ValueError: If a status has no template.
        """
        path = Path(templates_path) if templates_path else DEFAULT_TEMPLATES_PATH
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        self.header: str = data["header"]
        self.crew: str = data["crew"]
        self.statuses: Mapping[str, str] = data["statuses"]

        missing = [s.value for s in AnnouncementStatus if s.value not in self.statuses]
        if missing:
            raise ValueError(f"No announcement template for: {', '.join(missing)}")

        logger.debug("Loaded %d announcement templates from %s", len(self.statuses), path)

    def build_context(
        self, announcement: FlightAnnouncement, settings: BotSettings
    ) -> dict[str, Any]:
        """Collect template values for an announcement.

        Args:
            announcement: Announcement to render.
            settings: Bot settings (role, emoji).

        Returns:
            Placeholder values, including the rendered header and crew.
        """
        a = announcement
        service_line = f"Non-stop • {a.duration}" if a.non_stop else a.duration
        gate = " ".join(p for p in (a.departure_terminal, a.departure_gate) if p)

        context: dict[str, Any] = {
            "airline": a.airline,
            "flight_number": a.flight_number,
            "departure_airport": a.departure_airport,
            "arrival_airport": a.arrival_airport,
            "non_stop_label": "Non-stop" if a.non_stop else "",
            "service_line": service_line,
            "departure_date": format_airline_date(a.departure_time),
            "arrival_date": format_airline_date(a.arrival_time),
            "aircraft_type": a.aircraft_type,
            "captain": _mention_user(a.captain_id),
            "first_officer": _mention_user(a.first_officer_id),
            "additional_crew": _mention_user(a.additional_crew_id),
            "cabin_crew": _mention_user(a.cabin_crew_id),
            "hosted_in": _mention_channel(a.vc_channel_id),
            "gate": gate or NOT_AVAILABLE,
            "checkin_row": a.checkin_row or NOT_AVAILABLE,
            "booking_emoji": settings.booking_emoji,
            "checkin_opens": checkin_opens(a.departure_time),
            "gate_opens": gate_opens(a.departure_time),
            "departure_unix": unix_timestamp(a.departure_time),
            "role_mention": f"|| <@&{settings.announce_role_id}> ||" if a.ping_role else "",
        }
        context["header"] = self.header.format(**context)
        context["crew"] = self.crew.format(**context)
        return context

    def render(self, announcement: FlightAnnouncement, settings: BotSettings) -> str:
        """Render the message text for an announcement.

        Args:
            announcement: Announcement to render.
            settings: Bot settings (role, emoji).

        Returns:
            Message text ready to post.
        """
        template = self.statuses[announcement.status.value]
        text = template.format(**self.build_context(announcement, settings))
        return text.rstrip()
