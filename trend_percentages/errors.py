"""Exception types raised by the trend percentage calculator."""


class TrendPercentagesError(Exception):
    """Base class for errors a caller is expected to handle."""


class InvalidWindow(TrendPercentagesError, ValueError):
    """The requested time window is missing an endpoint or is empty."""


class RetrievalFailure(TrendPercentagesError):
    """The trend source could not produce samples for a parameter.

    This is distinct from a parameter that simply has no trend data, which
    is reported as an empty sample list.
    """


class InvalidParameterId(TrendPercentagesError, ValueError):
    """A parameter ID string could not be parsed."""


class ConfigError(TrendPercentagesError):
    """The settings file is empty or malformed."""


class InvariantViolation(RuntimeError):
    """An internal guarantee of the computation did not hold.

    Indicates a programming error, never a bad request.
    """
