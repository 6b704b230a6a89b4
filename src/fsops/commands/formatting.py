"""Render provider data and runway recommendations as embeds."""

from fsops.commands.messages import Embed
from fsops.runways.models import (
    RecommendationSource,
    RunwayRecommendation,
    SelectionTier,
    WindObservation,
)
from fsops.services.flights.models import Flight, FlightLeg
from fsops.services.flights.status import NOT_AVAILABLE, flight_status, format_utc
from fsops.services.weather.models import Metar, Taf, Wind

FORMAT_FORMATTED = "formatted"
FORMAT_RAW = "raw"


def _or_na(value: object) -> str:
    return NOT_AVAILABLE if value is None or value == "" else str(value)


def _code_block(text: str) -> str:
    return f"```{text or NOT_AVAILABLE}```"


def format_wind(wind: Wind | None) -> str:
    """Format wind as "200° 8KT", "VRB 3KT" or N/A."""
    if wind is None or wind.speed is None:
        return NOT_AVAILABLE
    if wind.is_calm:
        return "Calm"
    direction = "VRB" if wind.direction is None else f"{wind.direction}°"
    text = f"{direction} {wind.speed}KT"
    if wind.gust:
        text += f" G{wind.gust}KT"
    return text


def format_metar(metar: Metar, fmt: str = FORMAT_FORMATTED) -> Embed:
    """Build the METAR embed.

    Args:
        metar: Decoded METAR.
        fmt: "formatted" (decoded fields plus raw) or "raw".

    Returns:
        Embed for the reply.
    """
    embed = Embed(title=f"METAR {metar.icao}")

    if fmt == FORMAT_RAW:
        return embed.add_field("Raw METAR", _code_block(metar.raw_text))

    clouds = ", ".join(
        f"{cloud.text} at {cloud.feet}ft" if cloud.feet is not None else cloud.text
        for cloud in metar.clouds
    )

    embed.add_field("Wind", format_wind(metar.wind), inline=True)
    embed.add_field("Temperature", f"{_or_na(metar.temperature)}°C", inline=True)
    embed.add_field("Dewpoint", f"{_or_na(metar.dewpoint)}°C", inline=True)
    embed.add_field("Visibility", _or_na(metar.visibility), inline=True)
    embed.add_field("Pressure (QNH)", f"{_or_na(metar.qnh)} hPa", inline=True)
    embed.add_field("Clouds", clouds or NOT_AVAILABLE)
    embed.add_field("Raw METAR", _code_block(metar.raw_text))
    return embed


def format_taf(taf: Taf, fmt: str = FORMAT_FORMATTED) -> Embed:
    """Build the TAF embed.

    Args:
        taf: Decoded TAF.
        fmt: "formatted" (forecast periods plus raw) or "raw".

    Returns:
        Embed for the reply.
    """
    embed = Embed(title=f"TAF {taf.icao}")

    if fmt == FORMAT_RAW:
        return embed.add_field("Raw TAF", _code_block(taf.raw_text))

    lines = ["**Forecast:**"]
    if taf.forecast:
        lines.extend(f"• {p.start_time} to {p.end_time} — {p.text}" for p in taf.forecast)
    else:
        lines.append(NOT_AVAILABLE)

    embed.description = "\n".join(lines) + f"\n\nRaw TAF:\n{_code_block(taf.raw_text)}"
    return embed


def _format_leg(leg: FlightLeg) -> str:
    return (
        f"{_or_na(leg.airport)} ({_or_na(leg.iata)})\n"
        f"Terminal: {_or_na(leg.terminal)}\n"
        f"Gate: {_or_na(leg.gate)}\n"
        f"Scheduled: {format_utc(leg.scheduled)}\n"
        f"Estimated: {format_utc(leg.estimated)}"
    )


def format_flight(flight: Flight, footer: str) -> Embed:
    """Build the flight search embed."""
    embed = Embed(title=f"✈️ Flight {flight.iata}", footer=footer)
    embed.add_field("Status", flight_status(flight), inline=True)
    embed.add_field("Aircraft", _or_na(flight.aircraft_type), inline=True)
    embed.add_field("Registration", _or_na(flight.registration), inline=True)
    embed.add_field("Departure", _format_leg(flight.departure))
    embed.add_field("Arrival", _format_leg(flight.arrival))
    return embed


SOURCE_NOTES = {
    RecommendationSource.CATALOG: "Curated runway data.",
    RecommendationSource.INFERRED: (
        "⚠️ Inferred from airport data without local preferences. Verify before use."
    ),
    RecommendationSource.NONE: "No runway data available for this airport.",
}


def _format_runways(identifiers: tuple[str, ...], tier: SelectionTier) -> str:
    if not identifiers:
        return "None available"
    text = ", ".join(identifiers)
    if tier is SelectionTier.ENABLED:
        text += " (none aligned with wind)"
    return text


def format_recommendation(
    recommendation: RunwayRecommendation,
    wind: WindObservation,
    footer: str,
) -> Embed:
    """Build the runway recommendation embed.

    Args:
        recommendation: Selector output.
        wind: Wind the recommendation was made for.
        footer: Footer text.

    Returns:
        Embed listing departure and arrival runways with a note on the
        data source.
    """
    if wind.direction_degrees is None:
        wind_text = "Variable/calm"
    else:
        wind_text = f"{wind.direction_degrees:03d}°"
        if wind.speed_kts is not None:
            wind_text += f" {wind.speed_kts}KT"

    embed = Embed(
        title=f"Runways {recommendation.airport_id}",
        description=SOURCE_NOTES[recommendation.source],
        footer=footer,
    )
    embed.add_field("Wind", wind_text)
    if recommendation.source is not RecommendationSource.NONE:
        embed.add_field(
            "Departure",
            _format_runways(recommendation.departure, recommendation.departure_tier),
            inline=True,
        )
        embed.add_field(
            "Arrival",
            _format_runways(recommendation.arrival, recommendation.arrival_tier),
            inline=True,
        )
    return embed
