"""Command handling.

Each command is an async method returning platform-neutral replies. Every
FSOpsError raised while serving a command is logged and turned into an
ephemeral error reply, so a failing provider never breaks the bot.

Typical usage:
    from fsops.commands import CommandHandler

    handler = CommandHandler.from_settings(get_settings())
    replies = await handler.dispatch("metar", {"icao": "wsss"})
    await handler.close()
"""

from collections.abc import Mapping
from typing import Any

from fsops.announcements.models import AnnouncementStatus, FlightAnnouncement
from fsops.announcements.schedule import parse_schedule_time
from fsops.announcements.templates import AnnouncementRenderer
from fsops.commands.definitions import COMMANDS_BY_NAME
from fsops.commands.formatting import (
    FORMAT_FORMATTED,
    format_flight,
    format_metar,
    format_recommendation,
    format_taf,
)
from fsops.commands.messages import Reply, error_reply
from fsops.core.errors import FSOpsError, InvalidAirportIdError, normalize_airport_id
from fsops.core.logging_system import get_logger
from fsops.runways.catalog import RunwayCatalog
from fsops.runways.inference import RunwayInferenceClient
from fsops.runways.models import WindObservation
from fsops.runways.selector import RunwaySelector
from fsops.services.flights.aviationstack_client import AviationStackClient
from fsops.services.flights.status import map_flight_number
from fsops.services.weather.checkwx_client import CheckWXClient
from fsops.settings import BotSettings

logger = get_logger(__name__)

# Option names that clash with Python builtins
OPTION_ALIASES = {"format": "fmt"}

# Wind option values meaning "no direction"
VARIABLE_WIND = ("VRB", "CALM")


class CommandHandler:
    """Serve chat commands.

    Attributes:
        settings: Bot settings.
        selector: Runway selector.
        weather: METAR/TAF client.
        flights: Flight search client.
        renderer: Announcement renderer.
    """

    def __init__(
        self,
        settings: BotSettings,
        selector: RunwaySelector,
        weather: CheckWXClient,
        flights: AviationStackClient,
        renderer: AnnouncementRenderer | None = None,
    ) -> None:
        """Initialize command handler.

        Args:
            settings: Bot settings.
            selector: Runway selector.
            weather: METAR/TAF client.
            flights: Flight search client.
            renderer: Announcement renderer. Defaults to the packaged
                templates.
        """
        self.settings = settings
        self.selector = selector
        self.weather = weather
        self.flights = flights
        self.renderer = renderer or AnnouncementRenderer()

    @classmethod
    def from_settings(cls, settings: BotSettings) -> "CommandHandler":
        """Build a handler and all of its clients from settings."""
        if settings.runway_catalog_path:
            catalog = RunwayCatalog.from_yaml(settings.runway_catalog_path)
        else:
            catalog = RunwayCatalog.load_default()

        inference = RunwayInferenceClient(
            api_token=settings.airportdb_token, timeout=settings.http_timeout
        )
        return cls(
            settings=settings,
            selector=RunwaySelector(catalog, inference),
            weather=CheckWXClient(settings.checkwx_key, timeout=settings.http_timeout),
            flights=AviationStackClient(settings.aviationstack_key, timeout=settings.http_timeout),
        )

    async def dispatch(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        user_id: str | None = None,
    ) -> list[Reply]:
        """Run a command by name.

        Args:
            name: Command name (e.g., "metar").
            options: Option values keyed by option name. None values and
                options the command does not define are ignored.
            user_id: ID of the invoking user.

        Returns:
            Replies to send, in order.
        """
        definition = COMMANDS_BY_NAME.get(name)
        if definition is None:
            logger.warning("Unknown command: %s", name)
            return [error_reply(f"❌ Unknown command: {name}")]

        known = {option.name for option in definition.options}
        given = {
            key: value
            for key, value in (options or {}).items()
            if value is not None and key in known
        }
        missing = [option for option in definition.required_options if option not in given]
        if missing:
            return [error_reply(f"❌ Missing required option(s): {', '.join(missing)}")]

        for option in definition.options:
            if option.name in given and not option.accepts(given[option.name]):
                logger.warning("Rejected /%s %s=%r", name, option.name, given[option.name])
                return [error_reply(f"❌ Invalid value for {option.name}: {given[option.name]}")]

        kwargs = {OPTION_ALIASES.get(key, key): value for key, value in given.items()}
        logger.info("Running /%s %s", name, given)

        if name == "ping":
            return [await self.ping(user_id)]
        if name == "flightannounce":
            return await self.flightannounce(**kwargs)

        handler = getattr(self, name)
        return [await handler(**kwargs)]

    async def ping(self, user_id: str | None = None) -> Reply:
        """Answer a ping."""
        mention = f"<@{user_id}> " if user_id else ""
        return Reply(content=f"{mention}Pong!")

    async def flightsearch(self, flight_number: str) -> Reply:
        """Look up a flight by number.

        Args:
            flight_number: IATA or community ICAO-prefixed number.
        """
        flight_no = map_flight_number(flight_number.strip().upper())
        contact = self.settings.support_contact

        try:
            flight = await self.flights.search(flight_no)
        except FSOpsError as e:
            logger.warning("Flight search for %s failed: %s", flight_no, e)
            return error_reply(
                f"❌ Error fetching flight **{flight_no}**. "
                f"Please DM {contact} if you suspect an error."
            )

        if flight is None:
            return error_reply(
                f"Flight **{flight_no}** not found. If you suspect an error, please DM {contact}"
            )

        return Reply(embeds=[format_flight(flight, self.settings.footer)])

    async def metar(self, icao: str, fmt: str = FORMAT_FORMATTED) -> Reply:
        """Show the latest METAR.

        Args:
            icao: Airport ICAO code.
            fmt: "formatted" or "raw".
        """
        try:
            airport_id = normalize_airport_id(icao)
        except InvalidAirportIdError:
            return error_reply(f"❌ {icao} is not a valid ICAO code.")

        try:
            metar = await self.weather.get_metar(airport_id)
        except FSOpsError as e:
            logger.warning("METAR lookup for %s failed: %s", airport_id, e)
            return error_reply(
                f"Sorry, error fetching METAR for {airport_id}. "
                f"If you suspect an error, please DM {self.settings.support_contact}."
            )

        if metar is None:
            return error_reply(
                f"Sorry, no METAR found for {airport_id}. "
                "We apologize for any inconvenience caused."
            )

        return Reply(embeds=[format_metar(metar, fmt)])

    async def taf(self, icao: str, fmt: str = FORMAT_FORMATTED) -> Reply:
        """Show the latest TAF.

        Args:
            icao: Airport ICAO code.
            fmt: "formatted" or "raw".
        """
        try:
            airport_id = normalize_airport_id(icao)
        except InvalidAirportIdError:
            return error_reply(f"❌ {icao} is not a valid ICAO code.")

        try:
            taf = await self.weather.get_taf(airport_id)
        except FSOpsError as e:
            logger.warning("TAF lookup for %s failed: %s", airport_id, e)
            return error_reply("❌ Error fetching TAF")

        if taf is None:
            return error_reply(
                f"Sorry, no TAF found for {airport_id}. "
                "We apologize for any inconvenience caused."
            )

        return Reply(embeds=[format_taf(taf, fmt)])

    async def runway(self, icao: str, wind: int | str | None = None) -> Reply:
        """Recommend runways for the current or a given wind.

        Args:
            icao: Airport ICAO code.
            wind: Wind direction in degrees, or "VRB"/"CALM". When omitted,
                the wind of the latest METAR is used.
        """
        try:
            airport_id = normalize_airport_id(icao)
        except InvalidAirportIdError:
            return error_reply(f"❌ {icao} is not a valid ICAO code.")

        if isinstance(wind, str) and wind.strip().upper() in VARIABLE_WIND:
            observation = WindObservation()
        elif wind is not None:
            try:
                degrees = int(wind)
            except (TypeError, ValueError):
                return error_reply("❌ Wind direction must be a number of degrees (0-360).")
            if not 0 <= degrees <= 360:
                return error_reply("❌ Wind direction must be a number of degrees (0-360).")
            observation = WindObservation.from_degrees(degrees)
        else:
            try:
                metar = await self.weather.get_metar(airport_id)
            except FSOpsError as e:
                logger.warning("METAR lookup for %s failed: %s", airport_id, e)
                return error_reply(
                    f"Sorry, could not get the current wind for {airport_id}. "
                    "Try again with a wind direction."
                )
            if metar is None:
                return error_reply(
                    f"Sorry, no METAR found for {airport_id}. Try again with a wind direction."
                )
            observation = metar.wind_observation()

        recommendation = await self.selector.select(airport_id, observation)
        return Reply(
            embeds=[format_recommendation(recommendation, observation, self.settings.footer)]
        )

    async def flightannounce(
        self,
        channel: str,
        status: str,
        airline: str,
        flight_number: str,
        departure_airport: str,
        arrival_airport: str,
        non_stop: bool,
        duration: str,
        departure_time: str,
        arrival_time: str,
        aircraft_type: str,
        captain: str | None = None,
        first_officer: str | None = None,
        additional_crew_member: str | None = None,
        cabin_crew: str | None = None,
        vc_channel: str | None = None,
        departure_terminal: str | None = None,
        departure_gate: str | None = None,
        checkin_row: str | None = None,
        ping_role: bool | None = None,
    ) -> list[Reply]:
        """Post a flight announcement to a channel.

        Returns:
            The channel post followed by an ephemeral confirmation, or a
            single ephemeral error reply.
        """
        try:
            announcement_status = AnnouncementStatus(status)
        except ValueError:
            return [error_reply(f"❌ Unknown flight status: {status}")]

        try:
            departure = parse_schedule_time(departure_time)
            arrival = parse_schedule_time(arrival_time)
        except FSOpsError as e:
            logger.info("Rejected announcement times for %s: %s", flight_number, e)
            return [
                error_reply(
                    "❌ Invalid departure or arrival time. "
                    "Please use the format: YYYY-MM-DD HH:mm"
                )
            ]

        announcement = FlightAnnouncement(
            status=announcement_status,
            airline=airline,
            flight_number=flight_number,
            departure_airport=departure_airport,
            arrival_airport=arrival_airport,
            non_stop=bool(non_stop),
            duration=duration,
            departure_time=departure,
            arrival_time=arrival,
            aircraft_type=aircraft_type,
            captain_id=captain,
            first_officer_id=first_officer,
            additional_crew_id=additional_crew_member,
            cabin_crew_id=cabin_crew,
            vc_channel_id=vc_channel,
            departure_terminal=departure_terminal,
            departure_gate=departure_gate,
            checkin_row=checkin_row,
            ping_role=True if ping_role is None else bool(ping_role),
        )

        message = self.renderer.render(announcement, self.settings)
        logger.info("Posting %s announcement for %s", status, flight_number)
        return [
            Reply(content=message, channel_id=channel),
            Reply(
                content=f"Success! {flight_number} announcement has been posted in <#{channel}>",
                ephemeral=True,
            ),
        ]

    async def close(self) -> None:
        """Close all provider sessions."""
        await self.weather.close()
        await self.flights.close()
        if self.selector.inference is not None:
            await self.selector.inference.close()
