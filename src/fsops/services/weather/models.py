"""Weather data models for METAR and TAF lookups."""

from dataclasses import dataclass, field

from fsops.runways.models import WindObservation


@dataclass
class Wind:
    """Wind information.

    Attributes:
        direction: Direction in degrees the wind blows from, or None for
            variable or calm wind.
        speed: Wind speed in knots, or None if not reported.
        gust: Gust speed in knots, or None if no gusts.
    """

    direction: int | None
    speed: int | None
    gust: int | None = None

    @property
    def is_calm(self) -> bool:
        """Check if wind is calm (0 knots)."""
        return self.speed == 0

    @property
    def is_variable(self) -> bool:
        """Check if wind direction is variable."""
        return self.direction is None and not self.is_calm

    def to_observation(self) -> WindObservation:
        """Convert to the runway selector's wind value."""
        if self.is_calm:
            return WindObservation(direction_degrees=None, speed_kts=0)
        return WindObservation.from_degrees(self.direction, self.speed)


@dataclass
class CloudLayer:
    """Single cloud layer.

    Attributes:
        code: Coverage code (FEW, SCT, BKN, OVC, ...).
        text: Human-readable coverage (e.g., "Few").
        feet: Cloud base in feet AGL, or None.
    """

    code: str
    text: str
    feet: int | None = None


@dataclass
class Metar:
    """Decoded METAR observation.

    Attributes:
        icao: Airport ICAO code.
        raw_text: Original METAR string.
        wind: Wind, or None if the report has no wind group.
        temperature: Temperature in Celsius.
        dewpoint: Dewpoint in Celsius.
        visibility: Visibility as reported (e.g., "6+" miles).
        qnh: Pressure in hPa.
        clouds: Cloud layers, lowest first.
        observed: Observation time as reported by the provider.
    """

    icao: str
    raw_text: str
    wind: Wind | None = None
    temperature: float | None = None
    dewpoint: float | None = None
    visibility: str | None = None
    qnh: float | None = None
    clouds: list[CloudLayer] = field(default_factory=list)
    observed: str | None = None

    def wind_observation(self) -> WindObservation:
        """Wind for runway selection; unknown wind counts as variable."""
        if self.wind is None:
            return WindObservation()
        return self.wind.to_observation()


@dataclass
class TafPeriod:
    """One forecast period of a TAF."""

    start_time: str
    end_time: str
    text: str = ""


@dataclass
class Taf:
    """Decoded TAF forecast.

    Attributes:
        icao: Airport ICAO code.
        raw_text: Original TAF string.
        forecast: Forecast periods in issue order.
    """

    icao: str
    raw_text: str
    forecast: list[TafPeriod] = field(default_factory=list)
