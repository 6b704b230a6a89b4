"""Declarative command definitions.

A chat platform adapter registers these; the handler uses them to check
required options and restricted choices before dispatching.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fsops.announcements.models import AnnouncementStatus


class OptionType(Enum):
    """Kinds of command option values."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    USER = "user"
    CHANNEL = "channel"
    VOICE_CHANNEL = "voice_channel"


@dataclass(frozen=True)
class CommandOption:
    """One option of a command.

    Attributes:
        name: Option name as passed to the handler.
        description: Help text.
        type: Value kind.
        required: Whether the option must be given.
        choices: Allowed (label, value) pairs, if restricted.
    """

    name: str
    description: str
    type: OptionType = OptionType.STRING
    required: bool = False
    choices: tuple[tuple[str, str], ...] = ()

    def accepts(self, value: Any) -> bool:
        """Whether value is allowed; unrestricted options accept anything."""
        return not self.choices or str(value) in {choice for _, choice in self.choices}


@dataclass(frozen=True)
class CommandDefinition:
    """A chat command."""

    name: str
    description: str
    options: tuple[CommandOption, ...] = field(default_factory=tuple)

    @property
    def required_options(self) -> tuple[str, ...]:
        """Names of options that must be provided."""
        return tuple(option.name for option in self.options if option.required)


FORMAT_CHOICES = (("Formatted", "formatted"), ("Raw", "raw"))


def _icao_option(example: str = "WSSS") -> CommandOption:
    return CommandOption("icao", f"Enter the ICAO code (e.g. {example})", required=True)


COMMAND_DEFINITIONS: tuple[CommandDefinition, ...] = (
    CommandDefinition(
        "flightsearch",
        "Search for flight information using AviationStack",
        (
            CommandOption(
                "flight_number", "Enter the flight number (eg. SQ108, SIA826)", required=True
            ),
        ),
    ),
    CommandDefinition(
        "metar",
        "Get METAR for an airport (raw/formatted)",
        (
            _icao_option(),
            CommandOption(
                "format", "Choose METAR format: Raw or Formatted", choices=FORMAT_CHOICES
            ),
        ),
    ),
    CommandDefinition(
        "taf",
        "Get TAF for an airport (raw/formatted)",
        (
            _icao_option(),
            CommandOption("format", "Choose TAF Format: Raw or Formatted", choices=FORMAT_CHOICES),
        ),
    ),
    CommandDefinition(
        "runway",
        "Recommend departure and arrival runways from the current wind",
        (
            _icao_option(),
            CommandOption(
                "wind",
                "Wind direction in degrees (leave empty to use the latest METAR)",
                type=OptionType.INTEGER,
            ),
        ),
    ),
    CommandDefinition("ping", "Ping the bot"),
    CommandDefinition(
        "flightannounce",
        "Post a flight announcement!",
        (
            CommandOption(
                "channel",
                "Select a channel to post the announcement.",
                type=OptionType.CHANNEL,
                required=True,
            ),
            CommandOption(
                "status",
                "Select flight status.",
                required=True,
                choices=tuple((status.label, status.value) for status in AnnouncementStatus),
            ),
            CommandOption("airline", "Airline", required=True),
            CommandOption("flight_number", "Enter the flight number", required=True),
            CommandOption("departure_airport", "The departure airport", required=True),
            CommandOption("arrival_airport", "The arrival airport", required=True),
            CommandOption(
                "non_stop", "Is the flight non-stop?", type=OptionType.BOOLEAN, required=True
            ),
            CommandOption(
                "duration", "Duration of the flight (estimated block time)", required=True
            ),
            CommandOption(
                "departure_time", "Scheduled Departure Time (YYYY-MM-DD HH:MM)", required=True
            ),
            CommandOption(
                "arrival_time", "Scheduled Arrival time (YYYY-MM-DD HH:MM)", required=True
            ),
            CommandOption("aircraft_type", "The aircraft type.", required=True),
            CommandOption(
                "captain", "Select the captain assigned for the flight.", type=OptionType.USER
            ),
            CommandOption(
                "first_officer",
                "Select the first officer assigned for the flight.",
                type=OptionType.USER,
            ),
            CommandOption(
                "additional_crew_member",
                "Select any additional assigned crew for the flight.",
                type=OptionType.USER,
            ),
            CommandOption(
                "cabin_crew", "Select cabin crew assigned for the flight.", type=OptionType.USER
            ),
            CommandOption(
                "vc_channel",
                "Select VC channel that the flight will be hosted in.",
                type=OptionType.VOICE_CHANNEL,
            ),
            CommandOption("departure_terminal", "Departure Terminal"),
            CommandOption("departure_gate", "Enter the departure gate."),
            CommandOption("checkin_row", "Enter the Check-in Row (Counter Check-in only)"),
            CommandOption(
                "ping_role", "Ping the role in the announcement?", type=OptionType.BOOLEAN
            ),
        ),
    ),
)

COMMANDS_BY_NAME: dict[str, CommandDefinition] = {
    definition.name: definition for definition in COMMAND_DEFINITIONS
}
