"""Errors raised by the adapters around the climate engine."""


class ClimateDataError(RuntimeError):
    """Base class for failures obtaining or storing climate data."""


class WeatherDataUnavailableError(ClimateDataError):
    """The weather provider failed or returned an unusable payload."""


class LocationNotFoundError(ClimateDataError):
    """A place name could not be resolved to coordinates."""
